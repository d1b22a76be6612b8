import logging
import socket
from lanwake.exceptions import TransmitError
from lanwake.libraries.magic_packet import MagicPacket
from lanwake.models.destination import BroadcastMode, DestinationModel

__all__ = ['Transmitter']

class Transmitter:
    @classmethod
    def send(cls, packet: MagicPacket, destination: DestinationModel) -> None:
        payload = bytes(packet)

        family, sockaddr = cls._resolve(destination)
        broadcast = cls._use_broadcast(destination.broadcast, family)

        logging.debug(f'Sending {len(payload)} bytes to {sockaddr} (broadcast={broadcast}, source={destination.source}, interface={destination.interface})')

        try:
            with socket.socket(family, socket.SOCK_DGRAM) as sock:
                if broadcast:
                    sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)

                if destination.interface:
                    cls._bind_to_device(sock, destination.interface)

                sock.bind((destination.source or '', 0))

                sent = sock.sendto(payload, sockaddr)
        except OSError as e:
            reason = e.strerror or str(e)

            raise TransmitError(f'Failed to send magic packet to {destination.endpoint}: {reason}', destination=sockaddr, errno=e.errno, reason=reason) from e

        if sent != len(payload):
            raise TransmitError(f'Partial send to {destination.endpoint}: {sent} of {len(payload)} bytes written', destination=sockaddr, reason='partial send')

    @classmethod
    def _resolve(cls, destination: DestinationModel) -> tuple[int, tuple]:
        family = socket.AF_UNSPEC

        # keep the destination family in line with an explicit source address
        if destination.source:
            family = socket.AF_INET6 if ':' in destination.source else socket.AF_INET

        try:
            addr_info = socket.getaddrinfo(destination.address, destination.port, family, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
        except OSError as e:
            reason = e.strerror or str(e)

            raise TransmitError(f'Could not resolve destination {destination.endpoint}: {reason}', errno=e.errno, reason=reason) from e

        if not addr_info:
            raise TransmitError(f'Could not resolve destination {destination.endpoint}', reason='no address')

        family, _, _, _, sockaddr = addr_info[0]

        return family, sockaddr

    @classmethod
    def _use_broadcast(cls, mode: BroadcastMode, family: int) -> bool:
        if mode == BroadcastMode.ON:
            return True

        if mode == BroadcastMode.OFF:
            return False

        # unicast sends ignore SO_BROADCAST
        return family == socket.AF_INET

    @classmethod
    def _bind_to_device(cls, sock: socket.socket, interface: str) -> None:
        option = getattr(socket, 'SO_BINDTODEVICE', None)

        if option is None:
            raise TransmitError(f'Binding to interface "{interface}" is not supported on this platform', reason='unsupported')

        sock.setsockopt(socket.SOL_SOCKET, option, interface.encode())
