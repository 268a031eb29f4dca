"""Command-line interface for the cloud estimator."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .api.server import run_server
from .config import default_config, load_config, load_scenario
from .core.engine import SimulationEngine
from .core.models import SimulationConfig, SimulationResult
from .utils.log import setup_logging
from .utils.results import cloudlet_frame, save_results

app = typer.Typer(name="cloud-estimator", help="VM placement and cloudlet timing estimator")
console = Console()


@app.command()
def simulate(
    scenario: Optional[Path] = typer.Option(None, "--scenario", "-c", help="Scenario file (YAML or JSON)"),
    host_count: int = typer.Option(2, "--host-count", help="Number of physical hosts"),
    pes_per_host: int = typer.Option(4, "--pes-per-host", help="Processing elements per host"),
    ram_per_host: int = typer.Option(16384, "--ram-per-host", help="RAM per host in MB"),
    mips_per_pe: int = typer.Option(1000, "--mips-per-pe", help="MIPS per processing element"),
    vm_count: int = typer.Option(5, "--vm-count", help="Number of VMs"),
    pes_per_vm: int = typer.Option(1, "--pes-per-vm", help="Processing elements per VM"),
    ram_per_vm: int = typer.Option(2048, "--ram-per-vm", help="RAM per VM in MB"),
    cloudlet_count: int = typer.Option(10, "--cloudlet-count", help="Number of cloudlets"),
    cloudlet_length: int = typer.Option(10000, "--cloudlet-length", help="Length of each cloudlet in MI"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed for reproducible runs"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Directory to export results to"),
    show_layout: bool = typer.Option(False, "--show-layout", help="Print the host layout"),
    as_json: bool = typer.Option(False, "--json", help="Print the result payload as JSON"),
    log_level: str = typer.Option("WARNING", "--log-level", "-l", help="Log level"),
) -> None:
    """Run one estimation and display the results."""

    setup_logging(log_level.upper())

    if scenario:
        try:
            config = load_scenario(scenario)
        except (FileNotFoundError, ValueError) as e:
            console.print(f"❌ Error loading scenario: {e}", style="bold red")
            raise typer.Exit(code=1)
    else:
        config = SimulationConfig(
            host_count=host_count,
            pes_per_host=pes_per_host,
            ram_per_host=ram_per_host,
            mips_per_pe=mips_per_pe,
            vm_count=vm_count,
            pes_per_vm=pes_per_vm,
            ram_per_vm=ram_per_vm,
            cloudlet_count=cloudlet_count,
            cloudlet_length=cloudlet_length,
        )

    outcome = SimulationEngine(seed=seed).run(config)
    if not outcome.ok:
        console.print(f"❌ Invalid configuration: {outcome.error.message}", style="bold red")
        raise typer.Exit(code=1)

    result = outcome.result

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        display_results_summary(config, result)
        if show_layout:
            display_host_layout(result)

    if output:
        run_dir = save_results(result, output)
        console.print(f"💾 Results saved to {run_dir}")


@app.command()
def serve(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings file path"),
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to listen on"),
) -> None:
    """Serve the simulation endpoint over HTTP."""

    if config:
        try:
            settings = load_config(str(config))
        except (FileNotFoundError, ValueError) as e:
            console.print(f"❌ Error loading config: {e}", style="bold red")
            raise typer.Exit(code=1)
    else:
        settings = default_config()

    if host:
        settings['server']['host'] = host
    if port:
        settings['server']['port'] = port

    setup_logging(settings['logging']['level'], settings['logging']['file'])

    console.print("🚀 Starting Cloud Estimator server", style="bold blue")
    run_server(settings)


def display_results_summary(config: SimulationConfig, result: SimulationResult) -> None:
    """Display simulation results summary."""

    table = Table(title="Simulation Results Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Unit", style="yellow")

    cloudlets = cloudlet_frame(result)
    if cloudlets.empty:
        mean_execution = 0.0
        latest_finish = 0.0
    else:
        mean_execution = float(cloudlets['execution_time'].mean())
        latest_finish = float(cloudlets['finish_time'].max())

    metrics = [
        ("Total Time", f"{result.total_time:.4f}", "seconds"),
        ("Success Rate", f"{result.success_rate:.2f}", "percentage"),
        ("RAM Utilization", f"{result.ram_utilization:.2f}", "percentage"),
        ("Hosts", f"{len(result.host_layout)}", "count"),
        ("VMs Allocated", f"{result.allocated_vms}/{config.vm_count}", "count"),
        ("VMs Unallocated", f"{result.unallocated_vms}", "count"),
        ("Cloudlets", f"{len(result.cloudlet_results)}", "count"),
        ("Mean Execution Time", f"{mean_execution:.4f}", "seconds"),
        ("Latest Finish", f"{latest_finish:.4f}", "seconds"),
    ]

    for metric, value, unit in metrics:
        table.add_row(metric, value, unit)

    console.print(table)


def display_host_layout(result: SimulationResult) -> None:
    """Display the VMs placed on each host."""

    table = Table(title="Host Layout")
    table.add_column("Host", style="cyan")
    table.add_column("VMs", style="green")

    for host in result.host_layout:
        table.add_row(str(host.id), ", ".join(str(vm) for vm in host.vms) or "-")

    console.print(table)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
