# gitcrypt_demo/utils/logger.py

import logging
import logging.handlers
from pathlib import Path
from typing import List, Optional

DEFAULT_LOG_FILE = Path(__file__).resolve().parents[2] / 'gitcrypt_demo.log'

CONSOLE_FORMAT = '%(asctime)s - [%(levelname)s] - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - [%(levelname)s] - %(filename)s:%(lineno)d - %(message)s'

# Handlers we attach carry this name, so a second setup can recognise them
# without being fooled by handlers some other tool (pytest, an IDE) installed.
HANDLER_NAME_PREFIX = 'gitcrypt_demo.'


class LoggerManager:
    """
    Attaches the demo's console and log-file handlers to the root logger.

    The console shows INFO (DEBUG with `verbose`), which is where the
    "cannot find file" and "not a text file" diagnostics end up for whoever
    is running the demo. The rotating file keeps everything at DEBUG.
    """

    def __init__(self, log_file_path: Optional[Path] = None, verbose: bool = False):
        self.log_file_path = Path(log_file_path) if log_file_path else DEFAULT_LOG_FILE
        self.console_level = logging.DEBUG if verbose else logging.INFO
        self.root_logger = logging.getLogger()

    def installed_handlers(self) -> List[logging.Handler]:
        return [h for h in self.root_logger.handlers
                if (h.get_name() or '').startswith(HANDLER_NAME_PREFIX)]

    def setup(self) -> bool:
        """
        Installs the handlers unless they are already there.

        Returns:
            True if handlers were added, False if logging was already configured.
        """
        if self.installed_handlers():
            return False

        self.root_logger.setLevel(logging.DEBUG)

        console = logging.StreamHandler()
        console.set_name(HANDLER_NAME_PREFIX + 'console')
        console.setLevel(self.console_level)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
        self.root_logger.addHandler(console)

        try:
            log_file = logging.handlers.RotatingFileHandler(
                self.log_file_path, maxBytes=1024*1024, backupCount=3, encoding='utf-8'
            )
        except OSError as e:
            # A read-only install directory still gets console logging.
            logging.warning(f"Cannot write log file {self.log_file_path}: {e}")
        else:
            log_file.set_name(HANDLER_NAME_PREFIX + 'file')
            log_file.setLevel(logging.DEBUG)
            log_file.setFormatter(logging.Formatter(FILE_FORMAT))
            self.root_logger.addHandler(log_file)

        logging.debug(f"Logging to console and {self.log_file_path}.")
        return True

    def teardown(self):
        """Removes and closes the handlers installed by `setup`."""
        for handler in self.installed_handlers():
            self.root_logger.removeHandler(handler)
            handler.close()


def setup_logging(verbose: bool = False, log_file_path: Optional[Path] = None) -> LoggerManager:
    """Initializes the application-wide logging system and returns its manager."""
    manager = LoggerManager(log_file_path=log_file_path, verbose=verbose)
    manager.setup()
    return manager
