from lanyard.application.commands.claim_attendee_command import ClaimAttendeeCommand

__all__ = ["ClaimAttendeeCommand"]
