from .supplier import Supplier
from .supplier_address import SupplierAddress
from .supplier_contact import SupplierContact
from .supplier_group import SupplierGroup
__all__ = ["Supplier","SupplierAddress","SupplierContact","SupplierGroup"]
