"""
Enumerations, request parameters and response shapes of the Vagon app
stream management API.

Request parameters are frozen dataclasses serialized through to_payload().
Responses are TypedDicts: parsed JSON is returned as-is, the server is the
source of truth and nothing here validates it.
"""

import dataclasses
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, TypedDict, Union


class RequestMethod(str, Enum):
    GET = 'GET'
    POST = 'POST'
    PUT = 'PUT'
    DELETE = 'DELETE'


class Resolution(str, Enum):
    AUTO = 'res_scale'
    RES_720P = 'res_720p'
    RES_1080P = 'res_1080p'
    RES_2160P = 'res_2160p'


class Sound(str, Enum):
    OFF = 'off'
    ACTIVATE_ON_START = 'activate_on_start'
    USER_CAN_ACTIVATE = 'user_can_activate'


class Microphone(str, Enum):
    OFF = 'off'
    ACTIVATE_ON_START = 'activate_on_start'
    USER_CAN_ACTIVATE = 'user_can_activate'


class DurationAutoTurnOff(str, Enum):
    OFF = 'off'
    IMMEDIATELY = 'immediately'
    MIN_2 = '2_min'
    MIN_5 = '5_min'
    MIN_30 = '30_min'
    HOUR_1 = '1_hour'
    HOUR_3 = '3_hour'
    HOUR_6 = '6_hour'


class DurationMaximumSession(str, Enum):
    OFF = 'off'
    MIN_5 = '5_min'
    MIN_10 = '10_min'
    MIN_15 = '15_min'
    MIN_30 = '30_min'
    HOUR_1 = '1_hour'


class DurationIdle(str, Enum):
    OFF = 'off'
    MIN_1 = '1_min'
    MIN_5 = '5_min'
    MIN_10 = '10_min'


class DockPosition(str, Enum):
    LEFT = 'left'
    RIGHT = 'right'
    TOP = 'top'
    BOTTOM = 'bottom'


class CapacityType(str, Enum):
    ON_DEMAND = 'on_demand'
    BALANCED = 'balanced'
    ALWAYS_ON = 'always_on'


class Region(str, Enum):
    DUBLIN = 'dublin'
    NORTH_VIRGINIA = 'north_virginia'
    OREGON = 'oregon'
    OHIO = 'ohio'
    MONTREAL = 'montreal'
    CALIFORNIA = 'california'
    SAO_PAOLO = 'sao_paolo'
    STOCKHOLM = 'stockholm'
    FRANKFURT = 'frankfurt'
    BAHRAIN = 'bahrain'
    MUMBAI = 'mumbai'
    SEOUL = 'seoul'
    TOKYO = 'tokyo'
    SINGAPORE = 'singapore'
    SYDNEY = 'sydney'
    JAKARTA = 'jakarta'
    UAE = 'uae'
    CAPE_TOWN = 'cape_town'
    HONG_KONG = 'hong_kong'


class GameEngine(str, Enum):
    UNITY = 'unity'
    UNREAL = 'unreal'


class KeyMappingSelection(str, Enum):
    CLICK = 'click'
    GAME_MODE = 'game_mode'


# Request parameters

@dataclasses.dataclass(frozen=True)
class Capacity:
    region: Region
    total_capacity: int


@dataclasses.dataclass(frozen=True)
class StreamConfig:
    """
    Stream settings sent to PUT /streams/{id}/config.

    Fields left as None are not sent, so the server keeps its current value.
    """
    resolution: Optional[Resolution] = None
    sound: Optional[Sound] = None
    microphone: Optional[Microphone] = None
    auto_turn_off_duration: Optional[DurationAutoTurnOff] = None
    maximum_session_duration: Optional[DurationMaximumSession] = None
    idle_duration: Optional[DurationIdle] = None
    launch_arguments: Optional[str] = None
    dark_mode: Optional[bool] = None
    collect_info: Optional[bool] = None
    password: Optional[str] = None
    password_protection: Optional[str] = None
    dock_position: Optional[DockPosition] = None
    keyboard_layout: Optional[str] = None
    user_session_data: Optional[bool] = None
    boost_enabled: Optional[bool] = None
    pixel_streaming_enabled: Optional[bool] = None
    port_access_enabled: Optional[bool] = None
    capacity_type: Optional[CapacityType] = None
    capacities: Optional[List[Capacity]] = None
    restart_application: Optional[bool] = None
    auto_start_application: Optional[bool] = None
    collect_application_logs: Optional[bool] = None
    game_engine: Optional[GameEngine] = None
    project_name: Optional[str] = None
    company_name: Optional[str] = None
    product_name: Optional[str] = None
    region_optimization: Optional[bool] = None
    show_play_page: Optional[bool] = None


@dataclasses.dataclass(frozen=True)
class StreamCreatePayload:
    application_id: str
    capacities: List[Capacity]
    capacity_type: CapacityType


@dataclasses.dataclass(frozen=True)
class ApplicationConfigurationSet:
    application_name: str
    key_mapping_selection: KeyMappingSelection
    changeable_key_mapping: bool
    machine_type_id: int


@dataclasses.dataclass(frozen=True)
class MachineStatsQuery:
    """Filters for the machine and visitor session statistics endpoints."""
    start_at: Optional[str] = None
    end_at: Optional[str] = None
    application_id: Optional[str] = None
    stream_id: Optional[str] = None


Payload = Union[Mapping[str, Any], Capacity, StreamConfig, StreamCreatePayload,
                ApplicationConfigurationSet, MachineStatsQuery]


def to_payload(value: Any) -> Any:
    """
    Convert request parameters into JSON-ready values.

    Dataclasses and mappings become dicts without their None entries, enum
    members become their string values, sequences are converted item by item.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            field.name: to_payload(getattr(value, field.name))
            for field in dataclasses.fields(value)
            if getattr(value, field.name) is not None
        }
    if isinstance(value, Mapping):
        return {key: to_payload(item) for key, item in value.items() if item is not None}
    if isinstance(value, (list, tuple)):
        return [to_payload(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    return value


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def to_query_params(value: Optional[Payload]) -> Dict[str, str]:
    """
    Flatten request parameters into string query parameters.

    Only scalar values are supported; how list or nested values would be
    encoded is undefined by the API.
    """
    if value is None:
        return {}
    return {key: _query_value(item) for key, item in to_payload(value).items()}


# Response shapes

class CoreApiResponse(TypedDict):
    client_code: int
    timestamp: str


class CapacityData(TypedDict):
    region: str
    total_capacity: int


class ExecutableAttributes(TypedDict):
    executable_name: str
    launch_arguments: Optional[str]
    restart_arguments: Optional[str]
    file: str
    version: int
    active: bool
    created_at: str
    images: List[Any]


class Executable(TypedDict):
    id: str
    type: str
    attributes: ExecutableAttributes


class ApplicationAttributes(TypedDict):
    name: str
    status: str
    banner_url: Optional[str]
    logo_url: Optional[str]
    friendly_status: str
    os: str
    active_executable: Executable


class Application(TypedDict):
    id: str
    type: str
    attributes: ApplicationAttributes
    performance: str
    enterprise: Any
    pro: Any


class StreamConfigData(TypedDict, total=False):
    resolution: str
    sound: str
    microphone: str
    auto_turn_off_duration: str
    maximum_session_duration: str
    idle_duration: str
    launch_arguments: str
    dark_mode: bool
    collect_info: bool
    password: str
    password_protection: str
    dock_position: str
    keyboard_layout: str
    user_session_data: bool
    boost_enabled: bool
    pixel_streaming_enabled: bool
    port_access_enabled: bool
    capacity_type: str
    capacities: List[CapacityData]
    restart_application: bool
    auto_start_application: bool
    collect_application_logs: bool
    game_engine: str
    project_name: str
    company_name: str
    product_name: str
    region_optimization: bool
    show_play_page: bool


class StreamConfigResponseAttributes(StreamConfigData, total=False):
    texts: Dict[str, str]
    application: Application


class StreamConfigResponse(CoreApiResponse):
    id: str
    type: str
    config: StreamConfigData
    attributes: StreamConfigResponseAttributes


class ApplicationListResponse(CoreApiResponse):
    applications: List[Application]
    count: int
    page: int


class StreamListResponse(CoreApiResponse):
    streams: List[Any]
    count: int
    page: int


class StatusAttributes(TypedDict):
    status: str


class StreamStatusChangeResponse(CoreApiResponse):
    id: str
    type: str
    attributes: StatusAttributes


class StreamCreateAttributes(TypedDict):
    status: str
    application_id: str


class StreamCreateResponse(CoreApiResponse):
    id: str
    type: str
    attributes: StreamCreateAttributes


class MachineAttributes(TypedDict):
    start_at: str
    status: str
    end_at: str
    friendly_status: str
    connection_status: str
    region: str
    uid: str
    cost: float
    duration: int
    application_name: str
    application_id: str
    stream_id: str
    stream_name: str
    machine_type: str
    public_ip_address: Optional[str]


class Machine(TypedDict):
    id: str
    type: str
    attributes: MachineAttributes


class MachinesListResponse(CoreApiResponse):
    machines: List[Machine]
    count: int
    page: int


class StreamMachineStatusChangeResponse(CoreApiResponse):
    id: str
    type: str
    attributes: MachineAttributes


class MachineAssignResponse(CoreApiResponse):
    connection_link: str
    machine: Machine


class UserAttributes(TypedDict):
    email: str


class UserCreateApiResponse(CoreApiResponse):
    type: str
    attributes: UserAttributes


class MachineStatsResponse(CoreApiResponse):
    machines: List[Machine]
    count: int
    page: int


class MachineGetResponse(CoreApiResponse):
    machine: Machine
