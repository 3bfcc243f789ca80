"""Window event handlers for the designer window"""

import logging

from PyQt5.QtCore import Qt


class EventMixin:
	"""Window event handlers (show, close, keyPress)"""

	def showEvent(self, event):
		"""Refresh the status bar once the window is on screen"""
		super().showEvent(event)
		if not getattr(self, '_shown_once', False):
			self._shown_once = True
			logging.getLogger('TubeDesigner').debug("Main window shown")
			self._update_status_bar()

	def closeEvent(self, event):
		"""Persist preferences before the window closes"""
		self._save_config()
		super().closeEvent(event)

	def keyPressEvent(self, event):
		"""Handle keyboard shortcuts not bound to menu actions"""
		# Escape deselects, except mid-drag
		if event.key() == Qt.Key_Escape and not self.controller.is_dragging:
			self.controller.clear_selection()
			event.accept()
		else:
			super().keyPressEvent(event)
