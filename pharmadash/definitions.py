"""
Field shapes of the records returned by the upstream API.

The upstream owns these records and their invariants; the shapes exist for
type-checking and display only. Naming follows the upstream, which mixes
snake_case and camelCase between resources.
"""

from typing import List, Optional, TypedDict


# ── Address ──────────────────────────────────────────────────────────

class State(TypedDict):
    id: str
    name: str
    citiesCount: int


class City(TypedDict):
    id: str
    name: str
    stateId: str
    stateName: str
    districtsCount: int


class District(TypedDict):
    id: str
    name: str
    cityId: str
    cityName: str
    stateId: str
    stateName: str


# ── Catalogue ────────────────────────────────────────────────────────

class Currency(TypedDict, total=False):
    id: str
    code: str
    name: str
    symbol: str
    exchange_rate: Optional[float]
    active: bool
    is_default: bool
    created_at: str
    updated_at: str


class Manufacturer(TypedDict, total=False):
    id: str
    name: str
    code: str
    description: Optional[str]
    country: str
    phone: Optional[str]
    email: Optional[str]
    website: Optional[str]
    active: bool
    created_at: str
    updated_at: str


class ItemGroup(TypedDict, total=False):
    id: str
    name: str
    description: Optional[str]
    active: bool
    created_at: str
    updated_at: str


class Item(TypedDict, total=False):
    id: str
    manufacturer_id: str
    item_group: str
    warehouse: Optional[str]
    item_name: str
    generic_name: Optional[str]
    barcode: str
    barcode2: Optional[str]
    buying_price: float
    selling_price: float
    currency: str
    form: str
    quantity: int
    volume: Optional[str]
    usage: Optional[str]
    importer: Optional[str]
    drug_class: str                  # "OTC" | "RX" | "Controlled"
    drug_class_description: Optional[str]
    enabled: bool
    created_at: str
    updated_at: str


class ItemFile(TypedDict):
    id: str
    file_type: str
    file_name: str
    file_path: str
    mime_type: str
    file_size: int


class ActiveIngredient(TypedDict, total=False):
    id: str
    active_ingredient_name: str
    created_at: str
    updated_at: str


class MedicineIngredient(TypedDict, total=False):
    item_id: str
    ingredient_id: str
    strength: str
    activeIngredient: ActiveIngredient


# ── People and sites ─────────────────────────────────────────────────

class User(TypedDict, total=False):
    id: str
    userName: str
    mobileNo: str
    role: str
    warehouseId: Optional[str]
    pharmacyId: Optional[str]
    enabled: bool
    createdAt: str
    updatedAt: str


class Warehouse(TypedDict, total=False):
    id: str
    warehouse_name: str
    district: str
    phone: str
    location: str
    status: str
    adminNotes: Optional[str]
    createdAt: str
    updatedAt: str


class Pharmacy(TypedDict, total=False):
    id: str
    pharmacy_name: str
    district: str
    phone: str
    status: str
    hasUploadedDocuments: bool
    documentUploadDate: Optional[str]
    adminNotes: Optional[str]
    userCount: int
    createdAt: str
    updatedAt: str


class PharmacyFile(TypedDict):
    id: str
    fileName: str
    fileType: str
    fileSize: str
    mimeType: str
    uploadedAt: str


class ActiveIngredientList(TypedDict):
    message: str
    activeIngredients: List[ActiveIngredient]
    total: int
