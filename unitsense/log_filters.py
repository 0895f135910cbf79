import logging


class TruncatingFilter(logging.Filter):
    """
    Caps the length of user-supplied text in log records.

    Expressions are logged as %-style arguments, so each argument longer
    than ``max_length`` is replaced by its shortened text before the message
    is built. A record without arguments has its message capped instead.
    """

    def __init__(self, name: str = "", max_length: int = 120):
        super().__init__(name)
        self.max_length = max_length

    def _shorten(self, value: object) -> object:
        text = str(value)
        if len(text) <= self.max_length:
            return value
        return f"{text[:self.max_length]}..."

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.args, tuple):
            record.args = tuple(self._shorten(arg) for arg in record.args)
        elif not record.args and isinstance(record.msg, str):
            record.msg = self._shorten(record.msg)
        return True
