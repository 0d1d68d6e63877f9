class AppointmentError(Exception):
    """Base class for failures the HTTP layer turns into a 4xx response."""
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class NotFoundError(AppointmentError):
    status_code = 404


class UnauthorizedError(AppointmentError):
    status_code = 403


class InvalidStateError(AppointmentError):
    status_code = 400


class AlreadyTerminalError(InvalidStateError):
    pass


class WrongPriorStateError(InvalidStateError):
    pass


class SchedulingValidationError(AppointmentError):
    status_code = 400
