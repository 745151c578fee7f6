import pytest
from app.codewars import status_message

@pytest.mark.parametrize('status, expected', [
    (400, 'Bad Request (400) for "ghost".'),
    (401, 'Unauthorized (401) - Invalid API key.'),
    (403, 'Forbidden (403) - Access denied for "ghost".'),
    (404, 'User not found: "ghost" (404).'),
    (405, 'Method Not Allowed (405).'),
    (406, 'Not Acceptable (406).'),
    (422, 'Unprocessable Entity (422) for "ghost".'),
    (429, 'Too Many Requests (429).'),
    (500, 'Internal Server Error (500).'),
    (503, 'Service Unavailable (503).'),
    (418, 'Unexpected error (418) for "ghost".'),
    (502, 'Unexpected error (502) for "ghost".'),
])
def test_status_message(status, expected):
    assert status_message(status, 'ghost') == expected
