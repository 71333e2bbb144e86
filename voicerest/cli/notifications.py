from typing import Optional

import click

from voicerest.cli.helpers import client_factory
from voicerest.cli.helpers.iterator_printer import OutputFormat, show_iterator
from voicerest.client.exceptions import ApiConnectionError, ApiError
from voicerest.common.environments import EnvironmentVariableRequired, InvalidEnvironmentVariable


@click.group('notifications')
def notifications_command_group():
    """ Inspect the notifications raised while processing calls """


@notifications_command_group.command('list')
@click.option('--call-sid', help='Call SID. Without it, list the notifications of the whole account.')
@click.option('--account-sid', help='Account SID, if it differs from the one of the credentials')
@click.option('--log', type=int, help='Only show errors (0) or warnings (1)')
@click.option('--message-date', help='Only show notifications of the given date (YYYY-MM-DD)')
@click.option('--page-size', type=click.IntRange(min=1), help='Number of records per request')
@click.option('--limit', type=click.IntRange(min=1), help='Maximum number of records to show')
@click.option('-o', '--output',
              type=click.Choice(OutputFormat.ALL),
              default=OutputFormat.DEFAULT,
              show_default=True,
              help='Output format')
def list_notifications(call_sid: Optional[str],
                       account_sid: Optional[str],
                       log: Optional[int],
                       message_date: Optional[str],
                       page_size: Optional[int],
                       limit: Optional[int],
                       output: str):
    """ List notifications """
    try:
        with client_factory.create_client() as client:
            if call_sid:
                records = client.list_call_notifications(call_sid,
                                                         log=log,
                                                         message_date=message_date,
                                                         page_size=page_size,
                                                         limit=limit,
                                                         account_sid=account_sid)
            else:
                records = client.list_account_notifications(log=log,
                                                            message_date=message_date,
                                                            page_size=page_size,
                                                            limit=limit,
                                                            account_sid=account_sid)

            show_iterator(output, records)
    except (ApiConnectionError, ApiError, EnvironmentVariableRequired, InvalidEnvironmentVariable) as e:
        raise click.ClickException(str(e))
