"""
Active ingredients and the item <-> ingredient association.
"""

from pharmadash import normalize
from pharmadash.actions.crud import Resource
from pharmadash.definitions import ActiveIngredient, MedicineIngredient
from pharmadash.proxy import call

ACTIVE_INGREDIENTS = Resource("/active-ingredients", "activeIngredients", "activeIngredient",
                              label="active ingredient")
MEDICINE_INGREDIENTS = Resource("/medicine-ingredients", "ingredients", "medicineIngredient",
                                label="ingredient link")


# ── Active ingredients ───────────────────────────────────────────────

def fetch_active_ingredients(ctx):
    return call(ctx, ACTIVE_INGREDIENTS.path, normalize=normalize.active_ingredients)


def search_active_ingredients(ctx, name: str):
    return call(ctx, f"{ACTIVE_INGREDIENTS.path}/search", params={"name": name},
                normalize=normalize.active_ingredients)


def fetch_active_ingredient_by_id(ctx, ingredient_id: str):
    return ACTIVE_INGREDIENTS.get(ctx, ingredient_id)


def create_active_ingredient(ctx, data: ActiveIngredient):
    return ACTIVE_INGREDIENTS.create(ctx, data)


def update_active_ingredient(ctx, ingredient_id: str, data: ActiveIngredient):
    return ACTIVE_INGREDIENTS.update(ctx, ingredient_id, data)


def delete_active_ingredient(ctx, ingredient_id: str):
    return ACTIVE_INGREDIENTS.delete(ctx, ingredient_id)


# ── Medicine ingredients (item <-> ingredient with strength) ─────────

def fetch_item_ingredients(ctx, item_id: str):
    return MEDICINE_INGREDIENTS.list(ctx, sub=f"item/{item_id}")


def fetch_ingredient_items(ctx, ingredient_id: str):
    return MEDICINE_INGREDIENTS.list(ctx, sub=f"ingredient/{ingredient_id}")


def fetch_medicine_ingredient(ctx, item_id: str, ingredient_id: str):
    return MEDICINE_INGREDIENTS.get(ctx, ingredient_id, item_id)


def add_ingredient_to_item(ctx, data: MedicineIngredient):
    return MEDICINE_INGREDIENTS.create(ctx, data)


def update_medicine_ingredient(ctx, item_id: str, ingredient_id: str, data: dict):
    return MEDICINE_INGREDIENTS.update(ctx, f"{item_id}/{ingredient_id}", data)


def remove_ingredient_from_item(ctx, item_id: str, ingredient_id: str):
    return MEDICINE_INGREDIENTS.delete(ctx, f"{item_id}/{ingredient_id}")
