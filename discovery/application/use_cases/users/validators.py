"""Common validation helpers for user use cases."""

MIN_PASSWORD_LENGTH = 6


def normalize_email(email: str) -> str:
    """Return ``email`` trimmed and lower-cased or raise ``ValueError``."""

    normalized = email.strip().lower()
    if normalized.count("@") != 1:
        raise ValueError("El correo electrónico no es válido")
    local_part, domain = normalized.split("@", 1)
    if not local_part or "." not in domain:
        raise ValueError("El correo electrónico no es válido")
    return normalized


def ensure_valid_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValueError(
            f"La contraseña debe tener al menos {MIN_PASSWORD_LENGTH} caracteres"
        )
