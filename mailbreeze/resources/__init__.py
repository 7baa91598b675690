from mailbreeze.resources.attachments import AttachmentsResource
from mailbreeze.resources.automations import AutomationsResource, EnrollmentsResource
from mailbreeze.resources.contacts import ContactsResource
from mailbreeze.resources.emails import EmailsResource
from mailbreeze.resources.lists import ListsResource
from mailbreeze.resources.verification import VerificationResource

__all__ = [
    "AttachmentsResource",
    "AutomationsResource",
    "ContactsResource",
    "EmailsResource",
    "EnrollmentsResource",
    "ListsResource",
    "VerificationResource",
]
