# backend/supplier_api/domain/constants.py

"""
Tedarikçi durumları ve API mesaj metinlerinin tek kaynağı.
"""

from typing import Final

# Oluşturulan her tedarikçi bu durumla başlar
STATUS_IN_PROGRESS: Final[str] = "In Progress"

# ---- Başarı mesajları ----
MSG_SUPPLIER_CREATED: Final[str] = "Supplier created successfully"
MSG_SUPPLIERS_RETRIEVED: Final[str] = "Suppliers retrieved successfully"

# ---- Hata mesajları (yazma) ----
MSG_INVALID_BODY: Final[str] = "Invalid request body"
MSG_TX_START_FAILED: Final[str] = "Failed to start transaction"
MSG_SUPPLIER_CREATE_FAILED: Final[str] = "Failed to create supplier"
MSG_ADDRESS_SAVE_FAILED: Final[str] = "Failed to save address"
MSG_CONTACT_SAVE_FAILED: Final[str] = "Failed to save contact"
MSG_GROUP_SAVE_FAILED: Final[str] = "Failed to save group"
MSG_TX_COMMIT_FAILED: Final[str] = "Failed to commit transaction"

# ---- Hata mesajları (okuma) ----
MSG_RETRIEVE_FAILED: Final[str] = "Failed to retrieve suppliers"
MSG_PROCESS_FAILED: Final[str] = "Failed to process data"
MSG_DB_UNREACHABLE: Final[str] = "Database is not reachable"
