import os
import logging
from logging.handlers import TimedRotatingFileHandler
from lanwake.exceptions import LanWakeRuntimeError, TransmitError
from lanwake.libraries.magic_packet import MagicPacket
from lanwake.models.wake_request import WakeRequestModel
from lanwake.services.wol import WolService
from lanwake.utils.logging import NoExceptionFormatter

__all__ = ['LanWakeManager']

class LanWakeManager:
    def __init__(self, *, log_file: str = '', log_level: str = '') -> None:
        self._log_file: str = log_file
        self._log_level: str = log_level

        self._logger: logging.Logger = self._logger_factory(self._log_file, self._log_level)
        self._wol: WolService = self._wol_factory()

    def wake(self, request: WakeRequestModel, *, dry_run: bool = False) -> MagicPacket:
        if dry_run:
            packet = self._wol.preview(request)
            self._logger.info(f'Dry run, magic packet for {packet.address} not sent')

            return packet

        try:
            return self._wol.wake(request)
        except TransmitError as e:
            self._logger.error(f'Could not wake {request.mac}: {e}')
            raise

    def _logger_factory(self, log_file: str, log_level: str) -> logging.Logger:
        levels = {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "ERROR": logging.ERROR,
            "CRITICAL": logging.CRITICAL,
        }

        format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

        if not log_level in levels:
            log_level = "INFO"

        logger = logging.getLogger()
        logger.setLevel(levels[log_level])

        if log_file:
            directory = os.path.dirname(log_file)

            try:
                if directory and not os.path.exists(directory):
                    os.makedirs(directory)
            except OSError as e:
                raise LanWakeRuntimeError(f"Failed to create log directory {directory}: {e}")

            try:
                handler = TimedRotatingFileHandler(log_file, when="midnight", backupCount=4)
            except OSError as e:
                raise LanWakeRuntimeError(f"Failed to open log file {log_file}: {e}")

            handler.setFormatter(logging.Formatter(format))
        else:
            handler = logging.StreamHandler()

            # tracebacks only reach the console when debugging
            if log_level == "DEBUG":
                handler.setFormatter(logging.Formatter(format))
            else:
                handler.setFormatter(NoExceptionFormatter(format))

        handler.setLevel(levels[log_level])

        logger.addHandler(handler)

        return logger.getChild('lanwake')

    def _wol_factory(self) -> WolService:
        wol_logger = self._logger.getChild('wol')

        return WolService(logger=wol_logger)
