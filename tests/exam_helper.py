import json
from typing import Any, Dict, List, Optional, Union

from voicerest.http.models import Request, Response
from voicerest.http.transport import HttpClient

ACCOUNT_SID = 'AC00000000000000000000000000000001'
CALL_SID = 'CA00000000000000000000000000000002'
CALL_NOTIFICATIONS_PATH = f'/2010-04-01/Accounts/{ACCOUNT_SID}/Calls/{CALL_SID}/Notifications.json'


class RecordingHttpClient(HttpClient):
    """ In-memory transport answering with queued responses and recording every request

        A queued None simulates a dropped connection.
    """

    def __init__(self, *responses: Optional[Response]):
        self.requests: List[Request] = []
        self.__responses = list(responses)
        self.closed = False

    def enqueue(self, response: Optional[Response]):
        self.__responses.append(response)

    def request(self, request: Request) -> Optional[Response]:
        self.requests.append(request.model_copy(deep=True))

        if not self.__responses:
            raise AssertionError(f'Unexpected request: {request}')

        return self.__responses.pop(0)

    def close(self):
        self.closed = True


def make_notification(index: int, **overrides) -> Dict[str, Any]:
    notification = dict(
        sid=f'NO{index:032d}',
        account_sid=ACCOUNT_SID,
        call_sid=CALL_SID,
        api_version='2010-04-01',
        log='0',
        error_code='11200',
        more_info='https://www.twilio.com/docs/errors/11200',
        message_date='Tue, 10 Aug 2010 08:02:17 +0000',
        message_text='EmailNotification=false&LogLevel=ERROR',
        request_method='POST',
        request_url='https://example.com/voice',
        date_created='Tue, 10 Aug 2010 08:02:17 +0000',
        date_updated='Tue, 10 Aug 2010 08:02:17 +0000',
        uri=f'/2010-04-01/Accounts/{ACCOUNT_SID}/Notifications/NO{index:032d}.json',
    )
    notification.update(overrides)
    return notification


def page_response(notifications: List[Dict[str, Any]],
                  next_page_uri: Optional[str] = None,
                  uri: Optional[str] = None,
                  **metadata) -> Response:
    body = dict(notifications=notifications,
                page_size=len(notifications),
                next_page_uri=next_page_uri,
                uri=uri)
    body.update(metadata)
    return Response(status_code=200, content=json.dumps(body))


def error_response(status_code: int, body: Union[str, Dict[str, Any]] = '') -> Response:
    return Response(status_code=status_code, content=body if isinstance(body, str) else json.dumps(body))
