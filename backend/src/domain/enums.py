"""
Domain Enums
Business enumerations for the application
"""
from enum import Enum
from typing import Dict, FrozenSet


class UserRole(str, Enum):
    """Role of the acting user, fixed for the session"""
    APPLICANT = "applicant"
    COMPANY_REP = "company_rep"
    ADMIN = "admin"


class ApplicationStatus(str, Enum):
    """Status of a job application"""
    PENDING = "pending"
    REVIEWED = "reviewed"
    INTERVIEW = "interview"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class NotificationKind(str, Enum):
    """Kind of notification created by a status transition"""
    UNDER_REVIEW = "under review"
    INTERVIEW_INVITATION = "interview invitation"
    ACCEPTANCE = "acceptance"
    REJECTION = "rejection"


class AuthorizationAction(str, Enum):
    """Actions checked by the authorization guard"""
    CREATE_APPLICATION = "create-application"
    READ_OWN_APPLICATION = "read-own-application"
    UPDATE_APPLICATION_STATUS = "update-application-status"
    READ_JOB_APPLICATIONS = "read-job-applications"
    READ_COMPANY_APPLICATIONS = "read-company-applications"
    UPDATE_APPLICATION_CONTENT = "update-application-content"
    DELETE_APPLICATION = "delete-application"


TERMINAL_STATUSES: FrozenSet[ApplicationStatus] = frozenset({
    ApplicationStatus.ACCEPTED,
    ApplicationStatus.REJECTED,
})

# pending is the initial status and has no notification
STATUS_NOTIFICATION_KINDS: Dict[ApplicationStatus, NotificationKind] = {
    ApplicationStatus.REVIEWED: NotificationKind.UNDER_REVIEW,
    ApplicationStatus.INTERVIEW: NotificationKind.INTERVIEW_INVITATION,
    ApplicationStatus.ACCEPTED: NotificationKind.ACCEPTANCE,
    ApplicationStatus.REJECTED: NotificationKind.REJECTION,
}

NOTIFICATION_TITLE = "Application Status Update"

NOTIFICATION_MESSAGES: Dict[NotificationKind, str] = {
    NotificationKind.UNDER_REVIEW: "Your application has been reviewed",
    NotificationKind.INTERVIEW_INVITATION: "You have been invited for an interview",
    NotificationKind.ACCEPTANCE: "Congratulations! Your application has been accepted",
    NotificationKind.REJECTION: "Your application has been rejected",
}


def get_notification_kind(status: ApplicationStatus) -> NotificationKind:
    """Notification kind emitted when an application enters ``status``"""
    return STATUS_NOTIFICATION_KINDS[status]


def is_transition_target(status: ApplicationStatus) -> bool:
    """Check if a status can be reached through a lifecycle transition"""
    return status in STATUS_NOTIFICATION_KINDS
