"""
Undo History Manager for Tube Joint Designer

Linear undo stack of deep-copied state snapshots.

The first saved state is the seed (the empty scene). Every later entry is
the document as it was just before an action. The stack is never popped
below the seed, so undo at the floor is a silent no-op. There is no redo:
an undone snapshot is gone for good.
"""

import copy
import logging


class HistoryManager:
	"""Manages undo history with state snapshots"""

	def __init__(self, max_history=None):
		"""
		Initialize the history manager

		Args:
			max_history: Maximum number of states to keep, or None for unbounded.
				When capped, the oldest states age out first.
		"""
		if max_history is not None and max_history < 1:
			raise ValueError(f"max_history must be at least 1, got {max_history}")
		self.max_history = max_history
		self.history = []  # List of state snapshots, top of stack last
		self._listeners = []  # Callbacks to notify on state changes
		self._logger = logging.getLogger('History')

	def __len__(self):
		return len(self.history)

	def save_state(self, state_data, description=""):
		"""
		Push a new state onto the stack

		Args:
			state_data: Dictionary containing the full state to save
			description: Optional description of the change
		"""
		# Deep copy so later edits to the live document never reach the stack
		snapshot = {
			'data': copy.deepcopy(state_data),
			'description': description
		}
		self.history.append(snapshot)

		if self.max_history is not None and len(self.history) > self.max_history:
			self.history.pop(0)

		self._notify_listeners()

		self._logger.debug(f"State saved: {description} (total: {len(self.history)})")

	def undo(self):
		"""
		Pop the most recent snapshot and return it for restoring

		Each snapshot is the state captured just before an action, so restoring
		the popped entry reverts exactly that one action.

		Returns:
			The restored state, or None if only the seed remains
		"""
		if not self.can_undo():
			self._logger.debug("Cannot undo - at beginning of history")
			return None

		snapshot = self.history.pop()

		self._notify_listeners()

		self._logger.debug(f"Undo: {snapshot['description']} (remaining: {len(self.history)})")
		# Popped entries are referenced nowhere else
		return snapshot['data']

	def can_undo(self):
		"""Check if undo is available"""
		return len(self.history) > 1

	def add_listener(self, callback):
		"""
		Add a listener to be notified when history state changes

		Args:
			callback: Function to call when history changes (receives can_undo)
		"""
		self._listeners.append(callback)

	def remove_listener(self, callback):
		"""Remove a listener"""
		if callback in self._listeners:
			self._listeners.remove(callback)

	def _notify_listeners(self):
		"""Notify all listeners of history state change"""
		for callback in self._listeners:
			try:
				callback(self.can_undo())
			except Exception as e:
				self._logger.error(f"Error notifying listener: {e}")

	def get_undo_description(self):
		"""Get the description of the action that undo would revert"""
		if self.can_undo():
			return self.history[-1]['description']
		return ""
