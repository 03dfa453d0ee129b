"""Per-resource API services exposed as attributes of ``Client``."""

from dnsimple.services.base import WILDCARD_ACCOUNT, ClientService
from dnsimple.services.registrar import RegistrarService
from dnsimple.services.zones import ZonesService

__all__ = ["WILDCARD_ACCOUNT", "ClientService", "RegistrarService", "ZonesService"]
