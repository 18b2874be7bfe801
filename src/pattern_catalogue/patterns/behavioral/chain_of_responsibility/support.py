"""Support ticket escalation - each department takes tickets up to its priority cap."""
from dataclasses import dataclass
from typing import Optional

from .base import Handler


@dataclass(frozen=True)
class SupportTicket:
    priority: int
    issue: str
    source: str


class SupportHandler(Handler[SupportTicket]):
    def __init__(self, max_priority: int, department: str,
                 successor: Optional["SupportHandler"] = None):
        super().__init__(successor)
        self.max_priority = max_priority
        self.department = department

    def can_handle(self, ticket: SupportTicket) -> bool:
        return ticket.priority <= self.max_priority

    def process(self, ticket: SupportTicket) -> str:
        print(f"[SUPPORT] {self.department} department: Handling ticket priority {ticket.priority}")
        print(f"  Issue: {ticket.issue} (from {ticket.source})")
        print(f"  Status: Assigned to {self.department} team")
        return self.department

    def on_forward(self, ticket: SupportTicket) -> None:
        print(
            f"[SUPPORT] {self.department} department: Cannot handle priority "
            f"{ticket.priority}, escalating..."
        )

    def exhausted_message(self, ticket: SupportTicket) -> str:
        return f"[SUPPORT] {self.department} department: No one can handle priority {ticket.priority}!"
