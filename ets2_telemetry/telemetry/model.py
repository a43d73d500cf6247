# ets2_telemetry/telemetry/model.py
from __future__ import annotations
from typing import Annotated, Any, ClassVar, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, Strict, model_validator
from pydantic.alias_generators import to_camel

from .util import first_present, fold_keys, wire_names

# Scalar types follow JSON strictly: no "1" -> True, no 2.5 -> 2.
# Floats still take JSON integers.
Flag = Annotated[bool, Strict()]
# Ints are bounded to int64, like the producer's own integer fields.
Count = Annotated[int, Strict(), Field(ge=-(2**63), le=2**63 - 1)]
Real = Annotated[float, Strict()]
Text = Annotated[str, Strict()]


class Record(BaseModel):
    """
    Base of every telemetry record: frozen, camelCase on the wire,
    tolerant to missing/unknown keys and to key casing.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    # wire key -> field name, for keys that do not follow the camelCase rule
    _legacy_keys: ClassVar[Dict[str, str]] = {}

    @model_validator(mode="before")
    @classmethod
    def _fold_wire_keys(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return fold_keys(cls._unnest(data), wire_names(cls))
        return data

    @classmethod
    def _unnest(cls, data: Mapping[str, Any]) -> Mapping[str, Any]:
        return data


class Vector(Record):
    x: Real = 0.0
    y: Real = 0.0
    z: Real = 0.0


class Placement(Record):
    """Position plus orientation, passed through in the game's own units."""

    x: Real = 0.0
    y: Real = 0.0
    z: Real = 0.0
    heading: Real = 0.0
    pitch: Real = 0.0
    roll: Real = 0.0

    @classmethod
    def _unnest(cls, data: Mapping[str, Any]) -> Mapping[str, Any]:
        # SDK form: {"position": {x,y,z}, "orientation": {heading,pitch,roll}}
        parts = [first_present(data, [key]) for key in ("position", "orientation")]
        parts = [p for p in parts if isinstance(p, Mapping)]
        if not parts:
            return data
        flat = dict(data)
        for part in parts:
            flat.update(part)
        return flat


class Game(Record):
    connected: Flag = False
    paused: Flag = False
    game_name: Text = ""
    time: Text = ""                     # absolute in-game time, opaque
    time_scale: Real = 0.0
    next_rest_stop_time: Text = ""      # opaque
    version: Text = ""
    telemetry_plugin_version: Text = ""


class Truck(Record):
    _legacy_keys: ClassVar[Dict[str, str]] = {
        "airPressureEmegrencyValue": "air_pressure_emergency_value",
        "oilPressureWarningLevel": "oil_pressure_warning_value",
        "waterTemperatureWarningLevel": "water_temperature_warning_value",
    }

    id: Text = ""        # brand id: "daf", "iveco", "man", "mercedes", "renault", "scania", "volvo"
    make: Text = ""      # localized brand name
    model: Text = ""     # localized model name

    speed: Real = 0.0                   # km/h
    cruise_control_speed: Real = 0.0    # km/h
    cruise_control_on: Flag = False
    odometer: Real = 0.0                # km

    gear: Count = 0                     # physical gear, negative = reverse
    displayed_gear: Count = 0           # gear shown on the dashboard
    forward_gears: Count = 0
    reverse_gears: Count = 0
    shifter_type: Text = ""             # "arcade", "automatic", "manual", "hshifter"

    engine_rpm: Real = 0.0
    engine_rpm_max: Real = 0.0

    fuel: Real = 0.0                        # liters
    fuel_capacity: Real = 0.0               # liters
    fuel_average_consumption: Real = 0.0    # liters/km
    fuel_warning_factor: Real = 0.0         # fraction of capacity
    fuel_warning_on: Flag = False

    # wear/damage, 0 (pristine) .. 1 (destroyed)
    wear_engine: Real = 0.0
    wear_transmission: Real = 0.0
    wear_cabin: Real = 0.0
    wear_chassis: Real = 0.0
    wear_wheels: Real = 0.0

    # raw input, -1..1; steering is counterclockwise
    user_steer: Real = 0.0
    user_throttle: Real = 0.0
    user_brake: Real = 0.0
    user_clutch: Real = 0.0

    # as used by the simulation: steer -1..1, pedals 0..1
    game_steer: Real = 0.0
    game_throttle: Real = 0.0
    game_brake: Real = 0.0
    game_clutch: Real = 0.0

    shifter_slot: Count = 0             # h-shifter slot, 0 = none
    engine_on: Flag = False
    electric_on: Flag = False
    wipers_on: Flag = False

    retarder_brake: Count = 0           # 0..retarder_step_count
    retarder_step_count: Count = 0      # 0 when no retarder is mounted
    park_brake_on: Flag = False
    motor_brake_on: Flag = False
    brake_temperature: Real = 0.0       # °C

    adblue: Real = 0.0                      # liters
    adblue_capacity: Real = 0.0             # liters
    adblue_average_consumption: Real = 0.0  # liters/km
    adblue_warning_on: Flag = False

    air_pressure: Real = 0.0                    # psi
    air_pressure_warning_on: Flag = False
    air_pressure_warning_value: Real = 0.0      # psi, warning below
    air_pressure_emergency_on: Flag = False
    air_pressure_emergency_value: Real = 0.0    # psi, emergency brakes below

    oil_temperature: Real = 0.0             # °C
    oil_pressure: Real = 0.0                # psi
    oil_pressure_warning_on: Flag = False
    oil_pressure_warning_value: Real = 0.0  # psi, warning below

    water_temperature: Real = 0.0               # °C
    water_temperature_warning_on: Flag = False
    water_temperature_warning_value: Real = 0.0 # °C, warning above

    battery_voltage: Real = 0.0                 # volts
    battery_voltage_warning_on: Flag = False
    battery_voltage_warning_value: Real = 0.0   # volts, warning below

    lights_dashboard_value: Real = 0.0  # backlight 0..1
    lights_dashboard_on: Flag = False

    blinker_left_active: Flag = False   # currently emitting light
    blinker_right_active: Flag = False
    blinker_left_on: Flag = False       # switched on
    blinker_right_on: Flag = False

    lights_parking_on: Flag = False
    lights_beam_low_on: Flag = False
    lights_beam_high_on: Flag = False
    lights_aux_front_on: Flag = False
    lights_aux_roof_on: Flag = False
    lights_beacon_on: Flag = False
    lights_brake_on: Flag = False
    lights_reverse_on: Flag = False

    placement: Placement = Field(default_factory=Placement)     # world space
    acceleration: Vector = Field(default_factory=Vector)        # vehicle space, m/s^2
    head: Vector = Field(default_factory=Vector)                # default head position, cabin space
    cabin: Vector = Field(default_factory=Vector)               # cabin joint, vehicle space
    hook: Vector = Field(default_factory=Vector)                # trailer hook, vehicle space


class Trailer(Record):
    attached: Flag = False
    id: Text = ""           # internal cargo id
    name: Text = ""         # localized cargo name
    mass: Real = 0.0        # kg
    wear: Real = 0.0        # 0..1
    placement: Placement = Field(default_factory=Placement)


class Job(Record):
    income: Count = 0
    deadline_time: Text = ""        # absolute in-game time, opaque
    remaining_time: Text = ""       # relative in-game time, opaque
    source_city: Text = ""
    source_company: Text = ""
    destination_city: Text = ""
    destination_company: Text = ""


class Navigation(Record):
    estimated_time: Text = ""       # opaque
    estimated_distance: Count = 0   # meters
    speed_limit: Count = 0          # km/h, route advisor


class TelemetrySnapshot(Record):
    """One complete telemetry reading. Built fresh on every poll."""

    game: Game = Field(default_factory=Game)
    truck: Truck = Field(default_factory=Truck)
    trailer: Trailer = Field(default_factory=Trailer)
    job: Job = Field(default_factory=Job)
    navigation: Navigation = Field(default_factory=Navigation)

    @model_validator(mode="before")
    @classmethod
    def _null_document(cls, data: Any) -> Any:
        return {} if data is None else data
