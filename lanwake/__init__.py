import sys
import argparse
from pydantic import ValidationError
from lanwake.manager import LanWakeManager
from lanwake.exceptions import LanWakeRuntimeError, ParseError, TransmitError
from lanwake.models.destination import BroadcastMode
from lanwake.models.wake_request import WakeRequestModel
from lanwake.info import __app_name__, __version__, __description__

EXIT_OK = 0
EXIT_TRANSMIT_ERROR = 1
EXIT_INPUT_ERROR = 2

def main(argv: list[str] | None = None):
    # get args from command line
    parser = argparse.ArgumentParser(description=__description__)

    parser.add_argument('mac', help='Hardware (MAC) address of the device to wake, e.g. AA:BB:CC:DD:EE:FF')
    parser.add_argument('-P', '--password', dest='password', help='SecureOn password (4 or 6 bytes, e.g. 11:22:33:44)')
    parser.add_argument('-b', '--broadcast', dest='address', help='Destination address (default: 255.255.255.255)')
    parser.add_argument('-p', '--port', dest='port', type=int, help='Destination UDP port (default: 9)')
    parser.add_argument('-s', '--source', dest='source', help='Local address to send from')
    parser.add_argument('-i', '--interface', dest='interface', help='Outgoing network interface (Linux only)')
    parser.add_argument('--broadcast-mode', dest='broadcast_mode', choices=[mode.value for mode in BroadcastMode], default=BroadcastMode.AUTO.value, help='Enable the socket broadcast option: auto (for IPv4 destinations), on or off')
    parser.add_argument('-n', '--dry-run', dest='dry_run', action='store_true', help='Build and print the magic packet without sending it')
    parser.add_argument('--log', dest='log_file', help='Log file where to write logs')
    parser.add_argument('--log-level', dest='log_level', help='Log level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument('--version', action='version', version=f'{__app_name__} {__version__}')

    args = parser.parse_args(argv)

    destination = {
        'address': args.address,
        'port': args.port,
        'source': args.source,
        'interface': args.interface,
        'broadcast': args.broadcast_mode,
    }

    try:
        request = WakeRequestModel(
            mac=args.mac,
            password=args.password,
            destination={key: value for key, value in destination.items() if value is not None},
        )
    except ValidationError as e:
        print(f"Invalid arguments, {e.error_count()} error(s):", file=sys.stderr)

        for error in e.errors(include_url=False):
            loc = '.'.join(str(x) for x in error['loc']) if error['loc'] else 'general'
            print(f"  - {loc}: {error['msg']}", file=sys.stderr)

        sys.exit(EXIT_INPUT_ERROR)

    try:
        lanwake = LanWakeManager(log_file=args.log_file or '', log_level=args.log_level or '')
    except LanWakeRuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_TRANSMIT_ERROR)

    try:
        packet = lanwake.wake(request, dry_run=args.dry_run)
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_INPUT_ERROR)
    except TransmitError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_TRANSMIT_ERROR)

    if args.dry_run:
        print(packet.hex())

    sys.exit(EXIT_OK)
