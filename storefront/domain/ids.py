# storefront/domain/ids.py
import time
import uuid


def new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex}"


def new_order_number() -> str:
    # czytelny numer: ORD-<ms>-<4 hex>, unikalnosc pilnuje constraint w bazie
    return f"ORD-{int(time.time() * 1000)}-{uuid.uuid4().hex[:4].upper()}"
