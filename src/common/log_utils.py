#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File Name   : log_utils.py
Date Created: 2025/4/23
Description : 日志记录工具（控制台色彩、文件记录）
"""

import os
import sys
import logging
from logging.handlers import RotatingFileHandler

from src.config.settings import CONFIG

DEFAULT_FMT = "%(asctime)s %(name)s %(levelname)s %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """为控制台输出添加颜色"""

    COLOR_MAP = {
        logging.DEBUG: "37",  # 白
        logging.INFO: "32",  # 绿
        logging.WARNING: "33",  # 黄
        logging.ERROR: "31",  # 红
        logging.CRITICAL: "35",  # 紫
    }
    CSI = "\033["
    RESET = "\033[0m"

    def format(self, record):
        msg = super().format(record)
        color = self.COLOR_MAP.get(record.levelno)
        return f"{self.CSI}{color}m{msg}{self.RESET}" if color else msg


def _resolve_level(level):
    if isinstance(level, str):
        return logging.getLevelName(level.upper()) if level else logging.INFO
    return level


def setup_logger(
    level=logging.INFO,  # 日志级别
    console_fmt=DEFAULT_FMT,  # 控制台日志格式
    dateformat=DEFAULT_DATEFMT,  # 日志时间格式
):
    """
    初始化根日志记录器（只挂一次控制台 handler，重复调用只更新级别）
    """
    level = _resolve_level(level)
    root = logging.getLogger()
    root.setLevel(level)

    for h in root.handlers:
        if getattr(h, "_colored_console", False):
            h.setLevel(level)
            return root

    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(level)
    ch.setFormatter(ColoredFormatter(fmt=console_fmt, datefmt=dateformat))
    ch._colored_console = True
    root.addHandler(ch)
    return root


def add_file_handler(
    logger,
    log_dir,
    log_filename,
    level=logging.INFO,
    max_bytes=100 * 1024 * 1024,  # 文件日志最大 100MB
    backup_count=3,  # 文件日志最多保留 3 个备份
):
    """
    给指定 logger 挂滚动文件输出（非彩色），同一路径不重复挂载
    """
    os.makedirs(log_dir, exist_ok=True)
    path = os.path.abspath(os.path.join(log_dir, log_filename))
    for h in logger.handlers:
        if isinstance(h, RotatingFileHandler) and h.baseFilename == path:
            return h

    fh = RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    fh.setLevel(_resolve_level(level))
    # 文件里就不加色了，用普通 Formatter
    fh.setFormatter(logging.Formatter(fmt=DEFAULT_FMT, datefmt=DEFAULT_DATEFMT))
    logger.addHandler(fh)
    return fh


def init_logger(name, module_name, log_dir=None, level=None):
    """
    初始化日志记录器（简化版）

    name 决定日志文件名，module_name 决定 logger 名称；
    log_dir 为 None 或配置 LOG_TO_FILE=false 时只输出到控制台。
    """
    log_config = CONFIG.get("LOG", {})
    level = level or log_config.get("level", "INFO")

    setup_logger(level=level)
    logger = logging.getLogger(module_name)
    if log_dir and log_config.get("to_file", True):
        add_file_handler(logger, log_dir, f"{name}_{module_name}.log", level=level)
    return logger
