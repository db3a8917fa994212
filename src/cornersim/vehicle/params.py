"""Vehicle and environment parameter definitions for the cornering model."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from cornersim.utils.constants import GRAVITY, INFINITE_SPEED
from cornersim.utils.exceptions import ConfigurationError

DEFAULT_ROAD_FRICTION_SCALE = 1.0
DEFAULT_MASS = 300.0
DEFAULT_WHEELBASE = 1.5
DEFAULT_TRACK_TO_WHEELBASE_RATIO = 0.8
DEFAULT_CG_HEIGHT = 0.1
DEFAULT_YAW_INERTIA = 100.0
DEFAULT_MU_LONG = 1.4
DEFAULT_MU_LAT = 1.6
DEFAULT_ROLL_STIFFNESS = 300.0
DEFAULT_ROLL_CENTER_HEIGHT = 0.1
DEFAULT_TIMESTEP = 0.01


def _require_finite(**values: float) -> None:
    """Raise if any named value is NaN or infinite.

    Args:
        **values: Parameter values keyed by their field name.

    Raises:
        cornersim.utils.exceptions.ConfigurationError: If a value is not finite.
    """
    for name, value in values.items():
        if not math.isfinite(value):
            msg = f"{name} must be finite, got: {value!r}"
            raise ConfigurationError(msg)


@dataclass(frozen=True)
class ModelConstants:
    """Mathematical constants and sentinels used by the model.

    Args:
        pi: Value of pi used for default path curvature.
        infinite_speed: Speed reported for straight-line driving [m/s].
    """

    pi: float = math.pi
    infinite_speed: float = INFINITE_SPEED

    def validate(self) -> None:
        """Validate constant values.

        Raises:
            cornersim.utils.exceptions.ConfigurationError: If pi or the
                sentinel speed is not finite and positive.
        """
        _require_finite(pi=self.pi, infinite_speed=self.infinite_speed)
        if self.pi <= 0.0:
            msg = "pi must be positive"
            raise ConfigurationError(msg)
        if self.infinite_speed <= 0.0:
            msg = "infinite_speed must be positive"
            raise ConfigurationError(msg)


@dataclass(frozen=True)
class EnvironmentParameters:
    """Environment parameters.

    Args:
        gravity: Gravitational acceleration [m/s^2].
        road_friction_scale: Road surface scale applied to both tire friction
            coefficients [-].
    """

    gravity: float = GRAVITY
    road_friction_scale: float = DEFAULT_ROAD_FRICTION_SCALE

    def validate(self) -> None:
        """Validate environment values.

        Raises:
            cornersim.utils.exceptions.ConfigurationError: If gravity or the
                road friction scale is not positive.
        """
        _require_finite(gravity=self.gravity, road_friction_scale=self.road_friction_scale)
        if self.gravity <= 0.0:
            msg = "gravity must be positive"
            raise ConfigurationError(msg)
        if self.road_friction_scale <= 0.0:
            msg = "road_friction_scale must be positive"
            raise ConfigurationError(msg)


@dataclass(frozen=True)
class InertialParameters:
    """Mass properties of the vehicle.

    Args:
        mass: Vehicle mass [kg].
        cg_to_front_axle: Longitudinal CoG offset behind the front axle [m].
        cg_height: Center-of-gravity height above ground [m].
        yaw_inertia: Yaw moment of inertia [kg*m^2].
    """

    mass: float = DEFAULT_MASS
    cg_to_front_axle: float = 0.5 * DEFAULT_WHEELBASE
    cg_height: float = DEFAULT_CG_HEIGHT
    yaw_inertia: float = DEFAULT_YAW_INERTIA

    def validate(self) -> None:
        """Validate mass properties.

        Raises:
            cornersim.utils.exceptions.ConfigurationError: If any value
                violates its bound.
        """
        _require_finite(
            mass=self.mass,
            cg_to_front_axle=self.cg_to_front_axle,
            cg_height=self.cg_height,
            yaw_inertia=self.yaw_inertia,
        )
        if self.mass <= 0.0:
            msg = "mass must be positive"
            raise ConfigurationError(msg)
        if self.cg_height < 0.0:
            msg = "cg_height must not be negative"
            raise ConfigurationError(msg)
        if self.yaw_inertia <= 0.0:
            msg = "yaw_inertia must be positive"
            raise ConfigurationError(msg)


@dataclass(frozen=True)
class GeometryParameters:
    """Chassis geometry.

    Args:
        wheelbase: Wheelbase [m].
        front_track: Front track width [m].
        rear_track: Rear track width [m].
    """

    wheelbase: float = DEFAULT_WHEELBASE
    front_track: float = DEFAULT_TRACK_TO_WHEELBASE_RATIO * DEFAULT_WHEELBASE
    rear_track: float = DEFAULT_TRACK_TO_WHEELBASE_RATIO * DEFAULT_WHEELBASE

    def validate(self) -> None:
        """Validate chassis geometry.

        Raises:
            cornersim.utils.exceptions.ConfigurationError: If wheelbase or a
                track width is not positive.
        """
        _require_finite(
            wheelbase=self.wheelbase,
            front_track=self.front_track,
            rear_track=self.rear_track,
        )
        if self.wheelbase <= 0.0:
            msg = "wheelbase must be positive"
            raise ConfigurationError(msg)
        if self.front_track <= 0.0 or self.rear_track <= 0.0:
            msg = "track widths must be positive"
            raise ConfigurationError(msg)


@dataclass(frozen=True)
class TireParameters:
    """Peak friction coefficients of the friction-circle tire model.

    Args:
        mu_long: Peak longitudinal friction coefficient [-].
        mu_lat: Peak lateral friction coefficient [-].
    """

    mu_long: float = DEFAULT_MU_LONG
    mu_lat: float = DEFAULT_MU_LAT

    def validate(self) -> None:
        """Validate friction coefficients.

        Raises:
            cornersim.utils.exceptions.ConfigurationError: If a coefficient is
                not positive.
        """
        _require_finite(mu_long=self.mu_long, mu_lat=self.mu_lat)
        if self.mu_long <= 0.0 or self.mu_lat <= 0.0:
            msg = "tire friction coefficients must be positive"
            raise ConfigurationError(msg)


@dataclass(frozen=True)
class RollParameters:
    """Linear roll-stiffness and roll-center definitions.

    Args:
        front_roll_stiffness: Front axle roll stiffness [N*m/rad].
        rear_roll_stiffness: Rear axle roll stiffness [N*m/rad].
        front_roll_center_height: Front roll-center height [m].
        rear_roll_center_height: Rear roll-center height [m].
    """

    front_roll_stiffness: float = DEFAULT_ROLL_STIFFNESS
    rear_roll_stiffness: float = DEFAULT_ROLL_STIFFNESS
    front_roll_center_height: float = DEFAULT_ROLL_CENTER_HEIGHT
    rear_roll_center_height: float = DEFAULT_ROLL_CENTER_HEIGHT

    @property
    def total_roll_stiffness(self) -> float:
        """Return combined front and rear roll stiffness [N*m/rad]."""
        return self.front_roll_stiffness + self.rear_roll_stiffness

    def validate(self) -> None:
        """Validate roll stiffness distribution.

        Raises:
            cornersim.utils.exceptions.ConfigurationError: If a stiffness is
                negative or both are zero.
        """
        _require_finite(
            front_roll_stiffness=self.front_roll_stiffness,
            rear_roll_stiffness=self.rear_roll_stiffness,
            front_roll_center_height=self.front_roll_center_height,
            rear_roll_center_height=self.rear_roll_center_height,
        )
        if self.front_roll_stiffness < 0.0 or self.rear_roll_stiffness < 0.0:
            msg = "roll stiffness values must not be negative"
            raise ConfigurationError(msg)
        if self.total_roll_stiffness <= 0.0:
            msg = "front_roll_stiffness + rear_roll_stiffness must be positive"
            raise ConfigurationError(msg)


@dataclass(frozen=True)
class SolverParameters:
    """Numerical controls for position integration.

    Args:
        timestep: Fixed integration step [s].
    """

    timestep: float = DEFAULT_TIMESTEP

    def validate(self) -> None:
        """Validate integration settings.

        Raises:
            cornersim.utils.exceptions.ConfigurationError: If the timestep is
                not positive.
        """
        _require_finite(timestep=self.timestep)
        if self.timestep <= 0.0:
            msg = "timestep must be positive"
            raise ConfigurationError(msg)


@dataclass(frozen=True)
class VehicleParameters:
    """Complete parameter set of the cornering model.

    The set is validated on construction; an invalid combination raises
    :class:`cornersim.utils.exceptions.ConfigurationError` immediately so that
    the per-step routines never see non-finite geometry.

    Args:
        constants: Mathematical constants and sentinels.
        environment: Gravity and road friction.
        inertial: Mass properties.
        geometry: Wheelbase and track widths.
        tires: Friction-circle coefficients.
        roll: Roll stiffness and roll-center heights.
        solver: Integration settings.
    """

    constants: ModelConstants = field(default_factory=ModelConstants)
    environment: EnvironmentParameters = field(default_factory=EnvironmentParameters)
    inertial: InertialParameters = field(default_factory=InertialParameters)
    geometry: GeometryParameters = field(default_factory=GeometryParameters)
    tires: TireParameters = field(default_factory=TireParameters)
    roll: RollParameters = field(default_factory=RollParameters)
    solver: SolverParameters = field(default_factory=SolverParameters)

    def __post_init__(self) -> None:
        """Validate the parameter set on construction."""
        self.validate()

    @property
    def weight(self) -> float:
        """Return static vehicle weight [N]."""
        return self.inertial.mass * self.environment.gravity

    @property
    def static_front_axle_load(self) -> float:
        """Static front axle normal load from the CoG position.

        Returns:
            Front axle load [N].
        """
        wheelbase = self.geometry.wheelbase
        return (wheelbase - self.inertial.cg_to_front_axle) * self.weight / wheelbase

    @property
    def static_rear_axle_load(self) -> float:
        """Static rear axle normal load from the CoG position.

        Returns:
            Rear axle load [N].
        """
        return self.inertial.cg_to_front_axle * self.weight / self.geometry.wheelbase

    @property
    def effective_mu_long(self) -> float:
        """Return longitudinal friction coefficient scaled by the road surface."""
        return self.environment.road_friction_scale * self.tires.mu_long

    @property
    def effective_mu_lat(self) -> float:
        """Return lateral friction coefficient scaled by the road surface."""
        return self.environment.road_friction_scale * self.tires.mu_lat

    def validate(self) -> None:
        """Validate every parameter group and cross-group bounds.

        Raises:
            cornersim.utils.exceptions.ConfigurationError: If any parameter
                violates its defined bound.
        """
        self.constants.validate()
        self.environment.validate()
        self.inertial.validate()
        self.geometry.validate()
        self.tires.validate()
        self.roll.validate()
        self.solver.validate()
        if not 0.0 <= self.inertial.cg_to_front_axle <= self.geometry.wheelbase:
            msg = "cg_to_front_axle must lie between the front and rear axle"
            raise ConfigurationError(msg)


def initialize_parameters() -> VehicleParameters:
    """Build the default vehicle parameter set.

    Returns:
        Validated parameter set in SI units.
    """
    return VehicleParameters()
