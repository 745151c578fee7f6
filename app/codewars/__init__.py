from .client import CodewarsClient, codewars_client, get_codewars_client, profile_page_url
from .errors import status_message
