"""
Interventions Demo — exercises lockdown, hotspots, masks and the experiment runner.

Demonstrates:
1. Toggling lockdown and hotspots partway through a live world
2. Moving the mask-coverage slider mid-outbreak
3. A/B testing mask policies with the ExperimentRunner
4. Sweeping the fatality rate
"""

from outbreak.core.config import SimulationConfig
from outbreak.core.state import State
from outbreak.core.world import generate_world, set_mask_coverage, toggle_hotspots, toggle_lockdown
from outbreak.experiment.presets import get_preset
from outbreak.experiment.runner import ExperimentRunner, advance
from outbreak.metrics.log import Log, count_states


def _fmt(counts):
    return " ".join(f"{s.value[:4]}={counts[s]:4d}" for s in State)


def demo_live_interventions():
    """Drive one world by hand, flipping interventions between phases."""
    print("=" * 60)
    print("DEMO 1: Live interventions")
    print("=" * 60)

    config = SimulationConfig(population_size=400, random_seed=7)
    world = generate_world(config)
    log = Log(max_size=config.log_size)

    advance(world, log, 600, config.log_interval)
    print(f"t={world.time:5d} before interventions  {_fmt(count_states(world))}")

    toggle_lockdown(world)
    toggle_hotspots(world)
    stopped = sum(1 for p in world.living() if p.is_stationary)
    print(f"Lockdown on, {len(world.hotspots)} hotspots, {stopped} agents stopped")

    advance(world, log, 600, config.log_interval)
    print(f"t={world.time:5d} under lockdown        {_fmt(count_states(world))}")

    set_mask_coverage(world, 0.9)
    toggle_lockdown(world)
    advance(world, log, 600, config.log_interval)
    print(f"t={world.time:5d} masks 90%, reopened   {_fmt(count_states(world))}")
    print(f"Log holds {len(log)} samples")


def demo_mask_ab_test():
    """Compare no masks against universal masks."""
    print()
    print("=" * 60)
    print("DEMO 2: Mask policy A/B test")
    print("=" * 60)

    a = get_preset("no_masks")
    b = get_preset("universal_masks")
    for cfg in (a, b):
        cfg.population_size = 400
        cfg.random_seed = 11

    comparison = ExperimentRunner().run_ab_test(a, b, "no_masks", "universal_masks", ticks=2400)
    for label, result in comparison.results.items():
        print(
            f"{label:16s} peak={result.peak_infected:4d} "
            f"dead={result.total_dead:4d} affected={result.affected_fraction:6.1%}"
        )
    print(f"Config diffs: {comparison.config_diffs}")


def demo_fatality_sweep():
    print()
    print("=" * 60)
    print("DEMO 3: Fatality sweep")
    print("=" * 60)

    base = SimulationConfig(population_size=300, random_seed=3)
    results = ExperimentRunner().run_parameter_sweep(
        base, "chance_of_death", [0.05, 0.1, 0.3], ticks=2000,
    )
    for label, result in results.items():
        print(f"{label:22s} dead={result.total_dead:4d} peak={result.peak_infected:4d}")


def main():
    demo_live_interventions()
    demo_mask_ab_test()
    demo_fatality_sweep()


if __name__ == "__main__":
    main()
