import os
import dotenv

dotenv.load_dotenv()

# ========= 项目基本路径 =========
BASE_DIR = os.path.dirname(os.path.abspath(os.path.dirname(__file__)))
PROJECT_DIR = os.path.dirname(BASE_DIR)
LOG_DIR = os.getenv("LOG_DIR", os.path.join(PROJECT_DIR, "logs"))


def _env_bool(key: str, default: str) -> bool:
    return os.getenv(key, default).strip().lower() in ("1", "true", "yes", "on")


def _env_list(key: str, default: str) -> list:
    return [item.strip() for item in os.getenv(key, default).split(",") if item.strip()]


# ========= 配置区 =========
CONFIG = {
    "SENTIMENT": {},
    "WEB": {},
    "LOG": {},
}

# ========= sentiment =========
SENTIMENT = {
    # 词典文件路径（tsv/txt/csv/json），为空则使用 vaderSentiment 自带词典
    "lexicon_path": os.getenv("LEXICON_PATH", ""),
    # 否定词翻转：not good => -good
    "negation": _env_bool("SENTIMENT_NEGATION", "true"),
    # score 保留小数位
    "precision": int(os.getenv("SENTIMENT_PRECISION", 4)),
    # 聊天消息审核阈值：score 低于该值视为不当内容
    "moderation_threshold": float(os.getenv("MODERATION_THRESHOLD", -3)),
}

# ========= web =========
WEB = {
    "host": os.getenv("HOST", "0.0.0.0"),
    "port": int(os.getenv("PORT", 5000)),
    "allow_origins": _env_list("ALLOW_ORIGINS", "*"),
}

# ========= log =========
LOG = {
    "level": os.getenv("LOG_LEVEL", "INFO").upper(),
    # 测试环境下可关闭文件日志
    "to_file": _env_bool("LOG_TO_FILE", "true"),
}

# ========= 重载配置 =========
CONFIG["SENTIMENT"] = SENTIMENT
CONFIG["WEB"] = WEB
CONFIG["LOG"] = LOG
