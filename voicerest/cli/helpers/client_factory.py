from voicerest.client.rest_client import VoiceRestClient
from voicerest.configuration.models import ClientConfiguration


def create_client() -> VoiceRestClient:
    """ Create a client configured from the environment variables """
    return VoiceRestClient.from_configuration(ClientConfiguration.from_env())
