"""
配置加载器
从 config.yml 加载插件配置
"""

import copy
import yaml
from pathlib import Path
from typing import Dict, Any, Optional


def load_config(config_file: Optional[str] = "config/config.yml") -> Dict[str, Any]:
    """
    加载配置文件，并以默认配置补全缺失的项

    Args:
        config_file: 配置文件路径（相对路径相对于插件根目录；None 表示只用默认配置）

    Returns:
        配置字典
    """
    config = _get_default_config()
    if config_file is None:
        return config

    config_path = Path(config_file)
    if not config_path.is_absolute():
        # 插件根目录（core 的父目录）
        config_path = Path(__file__).parent.parent / config_file

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            user_config = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return config
    except Exception as e:
        raise RuntimeError(f"配置文件加载失败: {e}")

    if not isinstance(user_config, dict):
        raise RuntimeError(f"配置文件格式错误: {config_path}")

    # 按节合并（用户配置覆盖默认值）
    for section, values in user_config.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values

    return config


_DEFAULT_CONFIG = {
    'site': {
        'base_url': 'https://www.csfd.cz',
    },
    'network': {
        'proxy_server': None,
        'timeout': 30,
        'use_cloudscraper': False,
        'accept_language': 'cs-CZ,cs;q=0.9,sk;q=0.8,en;q=0.7',
    },
    'search': {
        'year_penalty': 0.01,
    },
    'provider': {
        'metadata_id': 'csfd',
        'artwork_id': 'csfd-artwork',
        'icon': 'csfd_cz.png',
    },
    'logging': {
        'level': 'INFO',
        'log_file': 'csfd_scraper.log',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    }
}


def _get_default_config() -> Dict[str, Any]:
    """返回默认配置（副本）"""
    return copy.deepcopy(_DEFAULT_CONFIG)
