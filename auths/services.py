import secrets
import string

TEMP_PASSWORD_LENGTH = 10
TEMP_PASSWORD_ALPHABET = string.ascii_letters + string.digits


def generate_temp_password(length=TEMP_PASSWORD_LENGTH):
    """
    Random alphanumeric password handed out by the forgot-password flow.

    The user is forced to replace it on the next login.
    """
    return "".join(secrets.choice(TEMP_PASSWORD_ALPHABET) for _ in range(length))
