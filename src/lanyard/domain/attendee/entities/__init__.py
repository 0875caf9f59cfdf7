from lanyard.domain.attendee.entities.attendee import Attendee

__all__ = ["Attendee"]
