import re

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def to_kebab_case(name):
    """primaryContainer -> primary-container"""
    return _CAMEL_BOUNDARY.sub(r"\1-\2", name).lower()


def role_label(role_kebab):
    return role_kebab.replace("-", " ")
