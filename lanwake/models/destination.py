import ipaddress
import re
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ['BroadcastMode', 'DestinationModel', 'LIMITED_BROADCAST']

LIMITED_BROADCAST = '255.255.255.255'

_HOSTNAME_RE = re.compile(r'(?=.{1,253}$)[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)*\.?')
_INTERFACE_RE = re.compile(r'[^\s/:]{1,15}')

class BroadcastMode(str, Enum):
    AUTO = 'auto'
    ON = 'on'
    OFF = 'off'

class DestinationModel(BaseModel):
    address: str = LIMITED_BROADCAST
    port: int = Field(default=9, ge=1, le=65535)
    source: str | None = None
    interface: str | None = None
    broadcast: BroadcastMode = BroadcastMode.AUTO

    model_config = ConfigDict(extra='forbid')

    @field_validator('address')
    @classmethod
    def validate_address(cls, value: str) -> str:
        value = value.strip()

        if value == '<broadcast>':
            return LIMITED_BROADCAST

        # anything made of digits and dots (or holding a colon) must be a literal IP
        if ':' in value or re.fullmatch(r'[0-9.]+', value):
            try:
                return str(ipaddress.ip_address(value))
            except ValueError:
                raise ValueError(f"'{value}' is not a valid IP address")

        if not _HOSTNAME_RE.fullmatch(value):
            raise ValueError(f"'{value}' is not a valid IP address or hostname")

        return value

    @field_validator('source')
    @classmethod
    def validate_source(cls, value: str | None) -> str | None:
        if value is None:
            return None

        try:
            return str(ipaddress.ip_address(value.strip()))
        except ValueError:
            raise ValueError(f"'{value}' is not a valid IP address")

    @field_validator('interface')
    @classmethod
    def validate_interface(cls, value: str | None) -> str | None:
        if value is None:
            return None

        if not _INTERFACE_RE.fullmatch(value):
            raise ValueError(f"'{value}' is not a valid interface name")

        return value

    @property
    def endpoint(self) -> str:
        if ':' in self.address:
            return f'[{self.address}]:{self.port}'

        return f'{self.address}:{self.port}'
