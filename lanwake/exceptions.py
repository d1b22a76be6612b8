__all__ = [
    'LanWakeError',
    'LanWakeRuntimeError',
    'ParseError',
    'InvalidAddressFormat',
    'InvalidPasswordFormat',
    'TransmitError',
]

class LanWakeError(Exception):
    pass

class LanWakeRuntimeError(LanWakeError):
    pass

class ParseError(LanWakeError, ValueError):
    def __init__(self, message: str, value: str | None = None):
        super().__init__(message)
        self.value = value

class InvalidAddressFormat(ParseError):
    pass

class InvalidPasswordFormat(ParseError):
    pass

class TransmitError(LanWakeError):
    def __init__(self, message: str, *, destination: tuple | None = None, errno: int | None = None, reason: str = ''):
        super().__init__(message)
        self.destination = destination
        self.errno = errno
        self.reason = reason
