"""Simulation data model: configuration, host layout and cloudlet results."""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List


# snake_case attribute -> camelCase wire name
WIRE_NAMES: Dict[str, str] = {
    "host_count": "hostCount",
    "pes_per_host": "pesPerHost",
    "ram_per_host": "ramPerHost",
    "mips_per_pe": "mipsPerPe",
    "vm_count": "vmCount",
    "pes_per_vm": "pesPerVm",
    "ram_per_vm": "ramPerVm",
    "cloudlet_count": "cloudletCount",
    "cloudlet_length": "cloudletLength",
}


@dataclass(frozen=True)
class SimulationConfig:
    """Hypothetical data-center configuration for one estimation run.

    ``pes_per_host``, ``ram_per_host`` and ``ram_per_vm`` are carried through
    but not used by the current placement and timing model.
    """
    host_count: int
    pes_per_host: int
    ram_per_host: int
    mips_per_pe: int
    vm_count: int
    pes_per_vm: int
    ram_per_vm: int
    cloudlet_count: int
    cloudlet_length: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        """
        Build a config from a mapping using either wire (camelCase) or
        attribute (snake_case) names.

        Raises:
            ValueError: If a field is missing
        """
        values = {}
        missing = []
        for name, wire_name in WIRE_NAMES.items():
            if wire_name in data:
                values[name] = data[wire_name]
            elif name in data:
                values[name] = data[name]
            else:
                missing.append(wire_name)

        if missing:
            raise ValueError(f"Missing required simulation config keys: {missing}")

        return cls(**values)

    def to_dict(self) -> Dict[str, int]:
        return {WIRE_NAMES[f.name]: getattr(self, f.name) for f in fields(self)}


@dataclass
class HostAssignment:
    """VMs placed on a single host."""
    id: int
    vms: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "vms": list(self.vms)}


@dataclass
class CloudletResult:
    """Estimated start and finish time of one cloudlet."""
    id: int
    start_time: float
    finish_time: float

    @property
    def execution_time(self) -> float:
        return self.finish_time - self.start_time

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "startTime": self.start_time,
            "finishTime": self.finish_time,
        }


@dataclass
class SimulationResult:
    """Output of one engine invocation."""
    total_time: float
    success_rate: float
    ram_utilization: float
    host_layout: List[HostAssignment]
    cloudlet_results: List[CloudletResult]
    vm_count: int

    @property
    def allocated_vms(self) -> int:
        return sum(len(host.vms) for host in self.host_layout)

    @property
    def unallocated_vms(self) -> int:
        """VMs the planner could not fit on any host."""
        return max(0, self.vm_count - self.allocated_vms)

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation of the result."""
        return {
            "totalTime": self.total_time,
            "successRate": self.success_rate,
            "ramUtilization": self.ram_utilization,
            "hostLayout": [host.to_dict() for host in self.host_layout],
            "cloudletResults": [c.to_dict() for c in self.cloudlet_results],
        }
