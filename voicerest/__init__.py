from voicerest.client.exceptions import ApiConnectionError, ApiError, ListError, RestError
from voicerest.client.list_operation import FilterDefinition, ListResourceDefinition, PagedListOperation
from voicerest.client.page import Page, PageMetadata
from voicerest.client.resource_set import ResourceSet
from voicerest.client.rest_client import VoiceRestClient
from voicerest.configuration.models import ClientConfiguration
from voicerest.constants import __version__
from voicerest.http.models import Request, Response
from voicerest.http.transport import HttpClient, RequestsHttpClient
from voicerest.resources.notifications import NotificationRecord, read_account_notifications, \
    read_call_notifications
