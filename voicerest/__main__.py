import sys

import click

from voicerest.cli.notifications import notifications_command_group
from voicerest.common.logger import get_logger
from voicerest.constants import __version__

APP_NAME = 'voicerest'

__python_version = str(sys.version).replace("\n", " ")
__app_signature = f'{APP_NAME} {__version__} with Python {__python_version}'


@click.group(APP_NAME)
@click.version_option(__version__, message="%(version)s")
def voicerest():
    """
    Voice REST API Client CLI
    """
    get_logger(APP_NAME).debug(__app_signature)


@voicerest.command()
def version():
    """ Show the version of CLI/library """
    click.echo(__app_signature)


# noinspection PyTypeChecker
voicerest.add_command(notifications_command_group)

if __name__ == "__main__":
    voicerest.main(prog_name=APP_NAME)
