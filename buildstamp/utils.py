import os
import copy
import logging
import logging.handlers
import yaml
from typing import Dict, Any
from dotenv import load_dotenv


def load_config(config_path: str = 'buildstamp.yaml') -> Dict[str, Any]:
    """Load configuration from YAML file with environment variable overrides."""
    # Load environment variables
    load_dotenv()

    config = get_default_config()
    try:
        if os.path.exists(config_path):
            with open(config_path, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f) or {}
            validate_config(file_config)
            config = merge_config(config, file_config)
    except (OSError, yaml.YAMLError, ValueError) as e:
        logging.warning(f"Could not load config from {config_path}: {e}")
        config = get_default_config()

    # Override with environment variables
    config = apply_env_overrides(config)

    return config


def get_default_config() -> Dict[str, Any]:
    """Get default configuration values."""
    return {
        'version': {
            'major': 1,
            'minor': 0,
            'build_type': 'Increment',
            'revision_type': 'BuildIncrement',
            'starting_date': None,
            'version_file': None
        },
        'assembly_info': {
            'language': 'csharp',
            'output': None,
            'cls_compliant': False,
            'informational_version': None
        },
        'logging': {
            'level': 'INFO',
            'log_to_file': False,
            'log_filename': 'buildstamp.log',
            'rotate_logs': True,
            'logs_dir': 'logs'
        }
    }


def validate_config(file_config: Any) -> None:
    """Check that a loaded config file is a mapping of mapping sections."""
    if not isinstance(file_config, dict):
        raise ValueError(f"expected a mapping, got {type(file_config).__name__}")

    for section in get_default_config():
        value = file_config.get(section)
        if value is not None and not isinstance(value, dict):
            raise ValueError(f"section '{section}' must be a mapping, got {type(value).__name__}")


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        # An empty section in YAML loads as None
        if value is None and isinstance(merged.get(key), dict):
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to configuration."""
    env_mappings = {
        'BUILDSTAMP_MAJOR': ('version', 'major', int),
        'BUILDSTAMP_MINOR': ('version', 'minor', int),
        'BUILDSTAMP_BUILD_TYPE': ('version', 'build_type', str),
        'BUILDSTAMP_REVISION_TYPE': ('version', 'revision_type', str),
        'BUILDSTAMP_STARTING_DATE': ('version', 'starting_date', str),
        'BUILDSTAMP_VERSION_FILE': ('version', 'version_file', str),
        'BUILDSTAMP_LANGUAGE': ('assembly_info', 'language', str),
        'LOG_LEVEL': ('logging', 'level', str),
        'DEBUG_MODE': ('logging', 'level', lambda x: 'DEBUG' if x.lower() == 'true' else config['logging']['level'])
    }

    for env_var, (section, key, converter) in env_mappings.items():
        value = os.getenv(env_var)
        if value is not None:
            try:
                converted_value = converter(value)
                config.setdefault(section, {})[key] = converted_value
            except (ValueError, TypeError) as e:
                logging.warning(f"Invalid value for {env_var}: {value} - {e}")

    return config


def setup_logging(logging_config: Dict[str, Any]) -> logging.Logger:
    """Setup logging configuration."""
    level = getattr(logging, str(logging_config.get('level', 'INFO')).upper(), logging.INFO)

    # Configure logging
    logger = logging.getLogger()
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    # Console handler, stderr so stdout only carries command output
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)

    # Create formatter
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler
    if logging_config.get('log_to_file', False):
        logs_dir = logging_config.get('logs_dir', 'logs')
        os.makedirs(logs_dir, exist_ok=True)
        log_filename = os.path.join(logs_dir, logging_config.get('log_filename', 'buildstamp.log'))

        if logging_config.get('rotate_logs', True):
            # Rotating file handler
            file_handler = logging.handlers.RotatingFileHandler(
                log_filename,
                maxBytes=10*1024*1024,  # 10MB
                backupCount=5,
                encoding='utf-8'
            )
        else:
            # Regular file handler
            file_handler = logging.FileHandler(log_filename, encoding='utf-8')

        file_handler.setLevel(logging.DEBUG)  # File gets all logs
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
