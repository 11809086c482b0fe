import logging
import os

from jobfeed.core.config import LOG_DIR, LOG_LEVEL

APP = 'App'

class Logger:
    def __init__(self, logger_name):
        log_file = os.path.join(LOG_DIR, f'{logger_name}.log')

        self.logger = logging.getLogger(logger_name)
        self.logger.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))

        if not self.logger.handlers:
            os.makedirs(LOG_DIR, exist_ok=True)
            fh = logging.FileHandler(log_file)
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            fh.setFormatter(formatter)
            self.logger.addHandler(fh)

    def info(self, message):
        self.logger.info(message)

    def error(self, message):
        self.logger.error(message)

    def warning(self, message):
        self.logger.warning(message)

    def exception(self, message):
        self.logger.exception(message)

    def debug(self, message):
        self.logger.debug(message)

    def critical(self, message):
        self.logger.critical(message)
