from __future__ import annotations
"""Allowed status transitions for records whose status changes by explicit action.

Usage:
    from pharmasys.utils.fsm import TransitionValidator
    PURCHASE_FSM = TransitionValidator({
        'pending': {'approved', 'rejected'},
        'approved': set(),
    })
    PURCHASE_FSM.assert_can_transition(current_status, target_status)

Aborts with 400 if the transition is not allowed.
"""
from typing import Dict, Set
from flask import abort

class TransitionValidator:
    def __init__(self, graph: Dict[str, Set[str]], field_name: str = 'status'):
        self.graph = graph
        self.field_name = field_name

    def can_transition(self, current: str, target: str) -> bool:
        return target in self.graph.get(current, set())

    def assert_can_transition(self, current: str, target: str):
        if not self.can_transition(current, target):
            abort(400, description=f"Invalid {self.field_name} transition {current} -> {target}")
        return True

__all__ = ['TransitionValidator']
