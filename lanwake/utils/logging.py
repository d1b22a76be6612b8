import logging

__all__ = ['NoExceptionFormatter']

class NoExceptionFormatter(logging.Formatter):
    def format(self, record):
        exc_info = record.exc_info
        exc_text = record.exc_text
        record.exc_info = None
        record.exc_text = None

        formatted = super().format(record)

        record.exc_info = exc_info
        record.exc_text = exc_text

        return formatted
