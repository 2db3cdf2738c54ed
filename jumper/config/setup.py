from cachetools import cached

from jumper.config.logger import logging_setup


@cached(cache={})
def setup():
    """
    One-time setup of logging and directories. Idempotent.
    """

    logging_setup()
