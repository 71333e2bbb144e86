from typing import Optional

from pydantic import BaseModel

from voicerest.client.list_operation import FilterDefinition, ListResourceDefinition, PagedListOperation
from voicerest.constants import API_VERSION


class NotificationRecord(BaseModel):
    """ Log entry raised by the API while processing a call """
    sid: Optional[str] = None
    account_sid: Optional[str] = None
    call_sid: Optional[str] = None
    api_version: Optional[str] = None

    log: Optional[int] = None
    """ 0 for an error, 1 for a warning """

    error_code: Optional[int] = None
    more_info: Optional[str] = None
    message_date: Optional[str] = None
    message_text: Optional[str] = None
    request_method: Optional[str] = None
    request_url: Optional[str] = None
    date_created: Optional[str] = None
    date_updated: Optional[str] = None
    uri: Optional[str] = None


NOTIFICATION_FILTERS = (
    FilterDefinition(name='log', param_name='Log', value_type=int),
    FilterDefinition(name='message_date', param_name='MessageDate', value_type=str),
)

CALL_NOTIFICATIONS = ListResourceDefinition(
    name='NotificationResource',
    path_template=f'/{API_VERSION}/Accounts/{{account_sid}}/Calls/{{call_sid}}/Notifications.json',
    envelope_key='notifications',
    record_type=NotificationRecord,
    filters=NOTIFICATION_FILTERS,
)

ACCOUNT_NOTIFICATIONS = ListResourceDefinition(
    name='NotificationResource',
    path_template=f'/{API_VERSION}/Accounts/{{account_sid}}/Notifications.json',
    envelope_key='notifications',
    record_type=NotificationRecord,
    filters=NOTIFICATION_FILTERS,
)


def read_call_notifications(account_sid: str,
                            call_sid: str,
                            log: Optional[int] = None,
                            message_date: Optional[str] = None,
                            page_size: Optional[int] = None,
                            limit: Optional[int] = None) -> PagedListOperation[NotificationRecord]:
    return PagedListOperation(CALL_NOTIFICATIONS,
                              dict(account_sid=account_sid, call_sid=call_sid),
                              filters=dict(log=log, message_date=message_date),
                              page_size=page_size,
                              limit=limit)


def read_account_notifications(account_sid: str,
                               log: Optional[int] = None,
                               message_date: Optional[str] = None,
                               page_size: Optional[int] = None,
                               limit: Optional[int] = None) -> PagedListOperation[NotificationRecord]:
    return PagedListOperation(ACCOUNT_NOTIFICATIONS,
                              dict(account_sid=account_sid),
                              filters=dict(log=log, message_date=message_date),
                              page_size=page_size,
                              limit=limit)
