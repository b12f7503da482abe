"""ORM Models Package"""

from .user import UserModel
from .company import CompanyModel
from .job_offer import JobOfferModel
from .application import ApplicationModel
from .notification import NotificationModel

__all__ = [
    "UserModel",
    "CompanyModel",
    "JobOfferModel",
    "ApplicationModel",
    "NotificationModel",
]
