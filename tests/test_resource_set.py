from unittest import TestCase

from voicerest.client.exceptions import ApiConnectionError
from voicerest.resources.notifications import read_call_notifications
from tests.exam_helper import ACCOUNT_SID, CALL_NOTIFICATIONS_PATH, CALL_SID, RecordingHttpClient, \
    make_notification, page_response

SECOND_PAGE_URI = f'{CALL_NOTIFICATIONS_PATH}?PageSize=2&Page=1&PageToken=PANO2'
THIRD_PAGE_URI = f'{CALL_NOTIFICATIONS_PATH}?PageSize=2&Page=2&PageToken=PANO4'


class TestResourceSet(TestCase):
    def test_iterate_over_every_page(self):
        client = RecordingHttpClient(
            page_response([make_notification(1), make_notification(2)], next_page_uri=SECOND_PAGE_URI),
            page_response([make_notification(3), make_notification(4)], next_page_uri=THIRD_PAGE_URI),
            page_response([make_notification(5)]),
        )

        resource_set = read_call_notifications(ACCOUNT_SID, CALL_SID, page_size=2).execute(client)
        sids = [record.sid for record in resource_set]

        self.assertEqual(sids, [make_notification(i)['sid'] for i in range(1, 6)])
        self.assertEqual([r.url for r in client.requests], [CALL_NOTIFICATIONS_PATH, SECOND_PAGE_URI, THIRD_PAGE_URI])
        self.assertEqual(resource_set.loaded_pages, 3)
        self.assertIsNone(resource_set.current_page.next_page_uri)

    def test_next_page_is_fetched_only_after_the_current_page_is_consumed(self):
        client = RecordingHttpClient(
            page_response([make_notification(1), make_notification(2)], next_page_uri=SECOND_PAGE_URI),
            page_response([make_notification(3)]),
        )

        resource_set = read_call_notifications(ACCOUNT_SID, CALL_SID, page_size=2).execute(client)

        next(resource_set)
        next(resource_set)
        self.assertEqual(len(client.requests), 1)

        self.assertEqual(next(resource_set).sid, make_notification(3)['sid'])
        self.assertEqual(len(client.requests), 2)

    def test_limit_stops_paging(self):
        client = RecordingHttpClient(
            page_response([make_notification(1), make_notification(2)], next_page_uri=SECOND_PAGE_URI),
            page_response([make_notification(3), make_notification(4)], next_page_uri=THIRD_PAGE_URI),
        )

        operation = read_call_notifications(ACCOUNT_SID, CALL_SID, page_size=2, limit=3)
        records = list(operation.execute(client))

        self.assertEqual(len(records), 3)
        self.assertEqual(len(client.requests), 2)

    def test_without_auto_paging(self):
        client = RecordingHttpClient(
            page_response([make_notification(1), make_notification(2)], next_page_uri=SECOND_PAGE_URI),
        )

        records = list(read_call_notifications(ACCOUNT_SID, CALL_SID).execute(client, auto_paging=False))

        self.assertEqual(len(records), 2)
        self.assertEqual(len(client.requests), 1)

    def test_repeated_cursor_stops_paging(self):
        client = RecordingHttpClient(
            page_response([make_notification(1)], next_page_uri=SECOND_PAGE_URI),
            page_response([make_notification(2)], next_page_uri=SECOND_PAGE_URI),
        )

        records = list(read_call_notifications(ACCOUNT_SID, CALL_SID).execute(client))

        self.assertEqual(len(records), 2)
        self.assertEqual(len(client.requests), 2)

    def test_empty_page_with_cursor_is_skipped(self):
        client = RecordingHttpClient(
            page_response([], next_page_uri=SECOND_PAGE_URI),
            page_response([make_notification(1)]),
        )

        records = list(read_call_notifications(ACCOUNT_SID, CALL_SID).execute(client))

        self.assertEqual([r.sid for r in records], [make_notification(1)['sid']])

    def test_iteration_resumes_after_a_failed_page(self):
        client = RecordingHttpClient(
            page_response([make_notification(1)], next_page_uri=SECOND_PAGE_URI),
            None,
        )

        resource_set = read_call_notifications(ACCOUNT_SID, CALL_SID).execute(client)
        self.assertEqual(next(resource_set).sid, make_notification(1)['sid'])

        with self.assertRaises(ApiConnectionError):
            next(resource_set)

        client.enqueue(page_response([make_notification(2)]))

        self.assertEqual([r.sid for r in resource_set], [make_notification(2)['sid']])
        self.assertEqual([r.url for r in client.requests[1:]], [SECOND_PAGE_URI, SECOND_PAGE_URI])

    def test_finished_set_makes_no_further_requests(self):
        client = RecordingHttpClient(page_response([make_notification(1)]))

        resource_set = read_call_notifications(ACCOUNT_SID, CALL_SID).execute(client)

        self.assertEqual(len(list(resource_set)), 1)
        self.assertEqual(list(resource_set), [])
        self.assertEqual(len(client.requests), 1)
        self.assertEqual(resource_set.loaded_pages, 1)
