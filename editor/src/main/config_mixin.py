"""Configuration management for the designer window"""

import os
import json
import logging

from constants import (
	CONFIG_DIR_NAME, CONFIG_FILE_NAME, DEFAULT_ANGLE_MODE,
	DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT, MAX_HISTORY_ENTRIES
)
from models.angle_presets import is_known_option
from utils.logger import loggerRaise

_logger = logging.getLogger('Config')


def default_config():
	return {
		'window_size': [DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT],
		'angle_mode': DEFAULT_ANGLE_MODE,
		'max_history': MAX_HISTORY_ENTRIES,
	}


def validate_config(raw):
	"""Merge raw JSON values over the defaults, dropping invalid entries

	Args:
		raw: dict loaded from the config file

	Returns:
		dict with every key of default_config()
	"""
	config = default_config()
	if not isinstance(raw, dict):
		_logger.warning("Config root is not an object, using defaults")
		return config

	size = raw.get('window_size')
	if size is not None:
		if (isinstance(size, (list, tuple)) and len(size) == 2
				and all(isinstance(v, int) and v > 0 for v in size)):
			config['window_size'] = list(size)
		else:
			_logger.warning(f"Ignoring invalid window_size: {size!r}")

	angle_mode = raw.get('angle_mode')
	if angle_mode is not None:
		if is_known_option(angle_mode):
			config['angle_mode'] = angle_mode
		else:
			_logger.warning(f"Ignoring unknown angle_mode: {angle_mode!r}")

	if 'max_history' in raw:
		max_history = raw['max_history']
		if max_history is None or (isinstance(max_history, int) and max_history >= 1):
			config['max_history'] = max_history
		else:
			_logger.warning(f"Ignoring invalid max_history: {max_history!r}")

	return config


class ConfigMixin:
	"""User preference file: window size, last angle mode, history cap"""

	def _init_config_paths(self):
		self.config_dir = os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME)
		self.config_file = os.path.join(self.config_dir, CONFIG_FILE_NAME)

	def _load_config(self):
		"""Load settings from the config file, falling back to defaults"""
		self.config = default_config()
		if not os.path.exists(self.config_file):
			return self.config
		try:
			with open(self.config_file, 'r', encoding='utf-8') as f:
				raw = json.load(f)
		except json.JSONDecodeError as e:
			_logger.warning(f"Config file {self.config_file} is not valid JSON: {e}")
			return self.config
		except Exception as e:
			loggerRaise(e, "Error loading config")
		self.config = validate_config(raw)
		_logger.debug(f"Loaded config: {self.config}")
		return self.config

	def _save_config(self):
		"""Save current settings to the config file"""
		try:
			os.makedirs(self.config_dir, exist_ok=True)

			config = dict(self.config)
			config['window_size'] = [self.width(), self.height()]
			config['angle_mode'] = self.canvas_area.get_angle_mode()

			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(config, f, indent=2)
			self.config = config
		except Exception as e:
			loggerRaise(e, "Error saving config")
