"""Event emitter implementation using Observer Pattern."""
from typing import Callable, Dict, List, Optional


class EventEmitter:
    """
    Synchronous event emitter.

    Handlers run in registration order inside emit(). The upload
    coordinator emits 'stage' (file name, Stage) and 'outcome'
    (UploadOutcome) events on it.

    Example:
        >>> events = EventEmitter()
        >>> events.on('stage', lambda name, stage: print(name, stage.name))
        >>> events.emit('stage', 'a.txt', Stage.UPLOAD)
        a.txt UPLOAD
    """

    def __init__(self):
        self._handlers: Dict[str, List[Callable]] = {}

    def on(self, event: str, callback: Callable) -> 'EventEmitter':
        """Registers a handler for event."""
        self._handlers.setdefault(event, []).append(callback)
        return self

    def once(self, event: str, callback: Callable) -> 'EventEmitter':
        """Registers a handler that is removed after its first call."""
        def wrapper(*args, **kwargs):
            self.off(event, wrapper)
            callback(*args, **kwargs)
        return self.on(event, wrapper)

    def off(self, event: str, callback: Optional[Callable] = None) -> 'EventEmitter':
        """Removes one handler, or every handler of event when callback is None."""
        if callback is None:
            self._handlers.pop(event, None)
        elif event in self._handlers:
            self._handlers[event] = [cb for cb in self._handlers[event] if cb != callback]
        return self

    def listeners(self, event: str) -> List[Callable]:
        """Handlers currently registered for event."""
        return list(self._handlers.get(event, []))

    def emit(self, event: str, *args, **kwargs) -> int:
        """Calls every handler of event; returns how many ran."""
        handlers = self.listeners(event)
        for callback in handlers:
            callback(*args, **kwargs)
        return len(handlers)
