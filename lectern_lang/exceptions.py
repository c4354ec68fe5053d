class LecternError(Exception):
    """Base exception for the lesson runtime."""

    pass


class LessonException(LecternError):
    """Marker raised by the drills. Carries no payload."""

    pass
