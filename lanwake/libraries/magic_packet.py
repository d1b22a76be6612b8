import re
from lanwake.exceptions import InvalidAddressFormat, InvalidPasswordFormat

__all__ = ['HardwareAddress', 'SecureOnPassword', 'MagicPacket', 'build', 'parse_octets']

SEPARATORS = (':', '-')

_HEX_GROUP_RE = re.compile(r'[0-9a-fA-F]{1,2}')
_BARE_HEX_RE = re.compile(r'(?:[0-9a-fA-F]{2})+')
_DOTTED_DECIMAL_RE = re.compile(r'[0-9]{1,3}(?:\.[0-9]{1,3}){3}')

def parse_octets(value: str, lengths: tuple[int, ...]) -> bytes | None:
    """
    Parse a textual byte string such as "aa:bb:cc:dd:ee:ff", "AA-BB-CC-DD-EE-FF"
    or "aabbccddeeff" into raw octets.

    A string uses a single kind of separator and every group holds 1 or 2 hex
    digits. Returns None when the value is malformed or its octet count is not
    one of the allowed lengths.
    """
    if not isinstance(value, str):
        return None

    value = value.strip()

    separators = [sep for sep in SEPARATORS if sep in value]

    if len(separators) > 1:
        return None

    if separators:
        groups = value.split(separators[0])

        if not all(_HEX_GROUP_RE.fullmatch(group) for group in groups):
            return None
    else:
        if not _BARE_HEX_RE.fullmatch(value):
            return None

        groups = [value[i:i + 2] for i in range(0, len(value), 2)]

    if len(groups) not in lengths:
        return None

    return bytes(int(group, 16) for group in groups)

class HardwareAddress:
    LENGTH = 6

    def __init__(self, octets: bytes):
        octets = bytes(octets)

        if len(octets) != self.LENGTH:
            raise InvalidAddressFormat(f'Hardware address must be {self.LENGTH} octets long, got {len(octets)}', octets.hex())

        self._octets: bytes = octets

    @classmethod
    def parse(cls, value: str) -> 'HardwareAddress':
        octets = parse_octets(value, (cls.LENGTH,))

        if octets is None:
            raise InvalidAddressFormat(f'Invalid hardware address "{value}"', value)

        return cls(octets)

    @property
    def octets(self) -> bytes:
        return self._octets

    def __bytes__(self) -> bytes:
        return self._octets

    def __str__(self) -> str:
        return ':'.join(f'{octet:02X}' for octet in self._octets)

    def __repr__(self):
        return f'HardwareAddress({self})'

    def __eq__(self, other) -> bool:
        if not isinstance(other, HardwareAddress):
            return NotImplemented

        return self._octets == other._octets

    def __hash__(self) -> int:
        return hash(self._octets)

class SecureOnPassword:
    LENGTHS = (4, 6)

    def __init__(self, octets: bytes):
        octets = bytes(octets)

        if len(octets) not in self.LENGTHS:
            raise InvalidPasswordFormat(f'SecureOn password must be 4 or 6 octets long, got {len(octets)}')

        self._octets: bytes = octets

    @classmethod
    def parse(cls, value: str) -> 'SecureOnPassword':
        octets = None

        # IPv4-style passwords may also be written in dotted decimal
        if isinstance(value, str) and _DOTTED_DECIMAL_RE.fullmatch(value.strip()):
            parts = [int(part) for part in value.strip().split('.')]

            if all(part <= 0xFF for part in parts):
                octets = bytes(parts)
        else:
            octets = parse_octets(value, cls.LENGTHS)

        if octets is None:
            # the value is a secret, keep it out of the message
            raise InvalidPasswordFormat('Invalid SecureOn password, expected 4 or 6 octets')

        return cls(octets)

    @property
    def octets(self) -> bytes:
        return self._octets

    def __bytes__(self) -> bytes:
        return self._octets

    def __len__(self) -> int:
        return len(self._octets)

    def __repr__(self):
        return f'SecureOnPassword(<{len(self._octets)} octets>)'

    def __eq__(self, other) -> bool:
        if not isinstance(other, SecureOnPassword):
            return NotImplemented

        return self._octets == other._octets

    def __hash__(self) -> int:
        return hash(self._octets)

class MagicPacket:
    """
    Wake-on-LAN magic packet: a synchronization stream of six 0xFF bytes,
    the target hardware address repeated 16 times and, optionally, a 4 or 6
    byte SecureOn password.
    """
    SYNC_STREAM = b'\xff' * 6
    REPETITIONS = 16

    def __init__(self, address: HardwareAddress, password: SecureOnPassword | None = None):
        self._address: HardwareAddress = address
        self._password: SecureOnPassword | None = password

        payload = self.SYNC_STREAM + bytes(address) * self.REPETITIONS

        if password is not None:
            payload += bytes(password)

        self._payload: bytes = payload

    @property
    def address(self) -> HardwareAddress:
        return self._address

    @property
    def password(self) -> SecureOnPassword | None:
        return self._password

    @property
    def payload(self) -> bytes:
        return self._payload

    def hex(self, sep: str = ' ') -> str:
        return self._payload.hex(sep).upper()

    def __bytes__(self) -> bytes:
        return self._payload

    def __len__(self) -> int:
        return len(self._payload)

    def __repr__(self):
        return f'MagicPacket(address={self._address}, password={self._password!r}, length={len(self)})'

def build(address: str, password: str | None = None) -> MagicPacket:
    hardware_address = HardwareAddress.parse(address)

    secure_on = None

    if password:
        secure_on = SecureOnPassword.parse(password)

    return MagicPacket(hardware_address, secure_on)
