"""Reactive route state — bindings that follow the location and push URLs back."""

from pathwise.reactive.binding import BindingState, ReactiveBinding
from pathwise.reactive.scheduler import LoopScheduler, Scheduler, TimerHandle
from pathwise.reactive.sync import ThrottledSync

__all__ = [
    "BindingState",
    "LoopScheduler",
    "ReactiveBinding",
    "Scheduler",
    "ThrottledSync",
    "TimerHandle",
]
