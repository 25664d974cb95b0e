"""
hdfsbox — клиент WebHDFS: операции с метаданными HDFS без ручной сборки URL и разбора JSON.

Логи по умолчанию выключены; включение:
    from hdfsbox.base.log import setup_logger
    setup_logger("DEBUG")
"""

from loguru import logger

logger.disable("hdfsbox")

__version__ = "0.1.0"
