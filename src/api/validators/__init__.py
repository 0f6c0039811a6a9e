"""Validators: validação de payloads recebidos do browser."""

from api.validators.base64_payload import decode_base64_field, strip_data_url

__all__ = ["decode_base64_field", "strip_data_url"]
