from lanyard.application.queries.lookup_attendee_query import LookupAttendeeQuery

__all__ = ["LookupAttendeeQuery"]
