"""
State -> city -> district selection, modelled as an explicit sequence.

Changing an upstream selection always clears everything below it. A failed
fetch keeps earlier selections and leaves the next list empty; nothing is
rolled back.
"""

from typing import Any, Dict, List, Optional

from pharmadash.actions import address
from pharmadash.models import ActionContext

EMPTY = "empty"
STATE_LIST = "state_list"          # states loaded, none chosen
CITY_LIST = "city_list"            # state chosen, cities loaded
DISTRICT_LIST = "district_list"    # city chosen, districts loaded
COMPLETE = "complete"              # district chosen


class AddressCascade:

    def __init__(self, ctx: ActionContext):
        self.ctx = ctx
        self.stage = EMPTY
        self.error: Optional[str] = None
        self.states: List[Dict[str, Any]] = []
        self.cities: List[Dict[str, Any]] = []
        self.districts: List[Dict[str, Any]] = []
        self.state_id: Optional[str] = None
        self.city_id: Optional[str] = None
        self.district_id: Optional[str] = None

    def load(self) -> bool:
        self._reset_below_state()
        self.state_id = None
        result = address.fetch_states(self.ctx)
        if not result.ok:
            self.states = []
            self.stage = EMPTY
            self.error = result.error
            return False
        self.states = result.data["states"]
        self.stage = STATE_LIST
        self.error = None
        return True

    def select_state(self, state_id: str) -> bool:
        if self.stage == EMPTY:
            raise ValueError("States have not been loaded")
        self._reset_below_state()
        self.state_id = state_id
        self.stage = STATE_LIST
        result = address.fetch_cities(self.ctx, state_id)
        if not result.ok:
            self.error = result.error
            return False
        self.cities = result.data["cities"]
        self.stage = CITY_LIST
        self.error = None
        return True

    def select_city(self, city_id: str) -> bool:
        if self.state_id is None or self.stage not in (CITY_LIST, DISTRICT_LIST, COMPLETE):
            raise ValueError("Select a state before choosing a city")
        self.districts = []
        self.district_id = None
        self.city_id = city_id
        self.stage = CITY_LIST
        result = address.fetch_districts(self.ctx, city_id)
        if not result.ok:
            self.error = result.error
            return False
        self.districts = result.data["districts"]
        self.stage = DISTRICT_LIST
        self.error = None
        return True

    def select_district(self, district_id: str):
        if self.stage not in (DISTRICT_LIST, COMPLETE):
            raise ValueError("Select a city before choosing a district")
        if not any(isinstance(d, dict) and d.get("id") == district_id for d in self.districts):
            raise ValueError(f"District {district_id} is not in {self.city_id}")
        self.district_id = district_id
        self.stage = COMPLETE

    def selection(self) -> Dict[str, Optional[str]]:
        return {"state": self.state_id, "city": self.city_id, "district": self.district_id}

    def snapshot(self) -> Dict[str, Any]:
        return {
            "stage": self.stage,
            "error": self.error,
            "selection": self.selection(),
            "states": self.states,
            "cities": self.cities,
            "districts": self.districts,
        }

    def _reset_below_state(self):
        self.cities = []
        self.districts = []
        self.city_id = None
        self.district_id = None
