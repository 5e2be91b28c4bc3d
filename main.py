# main.py
"""
Main entry point for the Brownian motion trail effect.

This script orchestrates the whole lifecycle:
1. Loads configuration from `config.json`.
2. Initializes the logging system.
3. Opens the window and builds the simulation context for its canvas.
4. Runs the frame loop until the window closes or max_steps is reached.
5. Handles clean shutdown.
"""
import cProfile
import io
import logging
import pstats

from utils import setup_logging, load_config

CONFIG_PATH = 'config.json'


def main():
    """
    The main function to run the effect.
    """
    # Logging is not set up yet, so we use a print for this one error.
    try:
        config = load_config(CONFIG_PATH)
    except Exception as e:
        print(f"FATAL: Could not load {CONFIG_PATH}. Error: {e}")
        return

    setup_logging(config)

    logging.info("--- Brownian Motion Starting ---")

    run_params = config.get('run_control', {})
    vis_params = config.get('visualization', {})

    from configuration import SimulationConfig
    from simulation import Simulation
    from visualization import Visualizer

    # Validate before opening a window; a bad value stops here.
    sim_config = SimulationConfig.from_dict(config.get('simulation_parameters', {}))

    # --- Component Initialization ---
    # The visualizer determines the canvas dimensions and owns the theme signal.
    visualizer = Visualizer(vis_params)
    sim = Simulation(sim_config, visualizer.width, visualizer.height, visualizer.theme_provider)

    log_throttle = max(1, run_params.get('log_throttle_steps', 500))
    max_steps = run_params.get('max_steps', 0)  # 0 runs until the window closes
    profiler = cProfile.Profile() if run_params.get('profile', False) else None

    running = True

    if profiler:
        profiler.enable()
    while running:
        if not visualizer.handle_events(sim):
            break

        visualizer.draw(sim)
        frame_ms = visualizer.wait_for_next_frame(sim_config.target_frame_rate)

        # Hot loop: throttle logs
        if sim.frame_count % log_throttle == 0:
            logging.info(f"Frame {sim.frame_count}" + (f"/{max_steps}" if max_steps else ""))
            logging.debug(
                f"Frame {sim.frame_count} | {len(sim.walkers)} walkers | "
                f"boost frames left: {sim.walkers.boost_frames_remaining} | "
                f"paused: {sim.paused} | last frame: {frame_ms} ms"
            )

        if max_steps and sim.frame_count >= max_steps:
            logging.info(f"Reached max_steps ({max_steps}). Stopping.")
            running = False
    if profiler:
        profiler.disable()

    visualizer.close()
    logging.info("Frame loop finished.")

    if profiler:
        logging.info("--- Performance Profile ---")
        s = io.StringIO()
        stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
        stats.print_stats(20)
        logging.info(f"\n{s.getvalue()}")

    logging.info("--- Brownian Motion Shutting Down ---")


if __name__ == "__main__":
    main()
