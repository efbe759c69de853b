"""Synchronous event emitter used for pipeline notifications."""
from .event_emitter import EventEmitter

__all__ = ['EventEmitter']
