import logging
from lanwake.libraries.magic_packet import MagicPacket, build
from lanwake.libraries.transmitter import Transmitter
from lanwake.models.wake_request import WakeRequestModel

__all__ = ['WolService']

class WolService:
    def __init__(self, *, logger: logging.Logger):
        self._logger: logging.Logger = logger

    def preview(self, request: WakeRequestModel) -> MagicPacket:
        packet = build(request.mac, request.password)

        self._logger.debug(f'Built magic packet for {packet.address} ({len(packet)} bytes)')

        return packet

    def wake(self, request: WakeRequestModel) -> MagicPacket:
        packet = self.preview(request)
        destination = request.destination

        if packet.password is not None:
            self._logger.debug(f'Appending {len(packet.password)} byte SecureOn password')

        self._logger.info(f'Sending magic packet for {packet.address} to {destination.endpoint}')

        Transmitter.send(packet, destination)

        self._logger.info(f'Magic packet sent to {packet.address}')

        return packet
