STATUS_MESSAGES = {
    400: 'Bad Request (400) for "{username}".',
    401: 'Unauthorized (401) - Invalid API key.',
    403: 'Forbidden (403) - Access denied for "{username}".',
    404: 'User not found: "{username}" (404).',
    405: 'Method Not Allowed (405).',
    406: 'Not Acceptable (406).',
    422: 'Unprocessable Entity (422) for "{username}".',
    429: 'Too Many Requests (429).',
    500: 'Internal Server Error (500).',
    503: 'Service Unavailable (503).',
}

def status_message(status_code: int, username: str) -> str:
    """Human readable message for a failed profile request"""
    template = STATUS_MESSAGES.get(status_code, 'Unexpected error ({status}) for "{username}".')
    return template.format(status=status_code, username=username)
