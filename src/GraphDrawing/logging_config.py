"""
Logging configuration for the GraphDrawing package
"""
import logging
import sys

package_logger_name = 'GraphDrawing'


def setup_logging(level=logging.INFO, log_file=None):
    """
    Configures the 'GraphDrawing' logger
    :param level:    logging level (ex: logging.DEBUG to see every paint pass)
    :param log_file: optional file where to save the log too
    :return: the package logger
    """
    logger = logging.getLogger(package_logger_name)
    logger.setLevel(level)

    # avoid duplicated lines if called twice
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s', datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug('Logging initialized')
    return logger
