"""Wire schemas for the simulation endpoint."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..core.models import SimulationConfig, SimulationResult


class SimulationRequest(BaseModel):
    """Configuration payload posted by the client."""

    model_config = ConfigDict(populate_by_name=True)

    # Host capacity
    host_count: int = Field(..., alias="hostCount", description="Number of physical hosts")
    pes_per_host: int = Field(..., alias="pesPerHost", description="Processing elements per host")
    ram_per_host: int = Field(..., alias="ramPerHost", description="RAM per host in MB")
    mips_per_pe: int = Field(..., alias="mipsPerPe", description="MIPS rating of one processing element")

    # VM fleet
    vm_count: int = Field(..., alias="vmCount", description="Number of VMs to place")
    pes_per_vm: int = Field(..., alias="pesPerVm", description="Processing elements per VM")
    ram_per_vm: int = Field(..., alias="ramPerVm", description="RAM per VM in MB")

    # Job batch
    cloudlet_count: int = Field(..., alias="cloudletCount", description="Number of cloudlets")
    cloudlet_length: int = Field(..., alias="cloudletLength", description="Work per cloudlet in MI")

    def to_config(self) -> SimulationConfig:
        return SimulationConfig(**self.model_dump())


class HostLayoutEntry(BaseModel):
    id: int
    vms: List[int]


class CloudletResultEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    start_time: float = Field(..., alias="startTime")
    finish_time: float = Field(..., alias="finishTime")


class SimulationResponse(BaseModel):
    """Result payload returned to the client."""

    model_config = ConfigDict(populate_by_name=True)

    total_time: float = Field(..., alias="totalTime")
    success_rate: float = Field(..., alias="successRate")
    ram_utilization: float = Field(..., alias="ramUtilization")
    host_layout: List[HostLayoutEntry] = Field(..., alias="hostLayout")
    cloudlet_results: List[CloudletResultEntry] = Field(..., alias="cloudletResults")

    @classmethod
    def from_result(cls, result: SimulationResult) -> "SimulationResponse":
        return cls(
            total_time=result.total_time,
            success_rate=result.success_rate,
            ram_utilization=result.ram_utilization,
            host_layout=[HostLayoutEntry(id=h.id, vms=h.vms) for h in result.host_layout],
            cloudlet_results=[
                CloudletResultEntry(id=c.id, start_time=c.start_time, finish_time=c.finish_time)
                for c in result.cloudlet_results
            ],
        )
