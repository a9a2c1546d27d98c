import uuid

from werkzeug.security import check_password_hash, generate_password_hash


def generate_guest_code():
    return uuid.uuid4().hex[:8].upper()


def hash_password(password):
    return generate_password_hash(password, method="pbkdf2:sha256")


def verify_password(user, password):
    return check_password_hash(user.password_hash, password)
