import logging
import sys

LOG_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'


def setup_logging(level=logging.INFO):
    # force: replace whatever handlers an earlier call or the host installed
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt='%H:%M:%S',
                        stream=sys.stdout, force=True)
