import logging

from azure.identity import DefaultAzureCredential
from azure.keyvault.secrets import SecretClient

logger = logging.getLogger(__name__)


def fetch_secret(vault_uri: str, name: str) -> str:
    credential = DefaultAzureCredential()
    client = SecretClient(vault_url=vault_uri, credential=credential)
    logger.info("Fetching secret %s from key vault", name)
    return client.get_secret(name).value or ""
