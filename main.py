# main.py
"""
Main entry point for the maintenance page.

This script orchestrates the entire page lifecycle:
1. Loads configuration from `config.json`.
2. Initializes the logging system.
3. Sets up the window, the event loop and the page state.
4. Runs the frame loop.
5. Handles clean shutdown.
"""
import logging
from utils import setup_logging, load_config, effect_parameters
import cProfile
import pstats
import io

def main():
    """
    The main function to run the page.
    """
    # Load configuration from the JSON file first.
    # Logging is not set up yet, so we use a print for this one error.
    try:
        config = load_config('config.json')
    except Exception as e:
        print(f"FATAL: Could not load config.json. Error: {e}")
        return

    setup_logging(config)

    logging.info("--- Maintenance Page Starting ---")

    run_params = config.get('run_control', {})
    vis_params = config.get('visualization', {})
    effect_params = effect_parameters(config)

    from event_loop import EventLoop
    from page import MaintenancePage
    from visualization import Visualizer

    # --- Component Initialization ---
    # 1. The visualizer owns the window and the wall clock.
    visualizer = Visualizer(vis_params)

    # 2. The event loop starts at the window's current tick so loop time is wall time.
    loop = EventLoop(start_ms=visualizer.ticks())
    page = MaintenancePage(loop, effect_params)
    page.mount()

    profiler = cProfile.Profile() if run_params.get('profile', False) else None

    log_throttle = run_params.get('log_throttle_frames', 240)
    max_frames = run_params.get('max_frames', 0)  # 0 runs until the window is closed

    running = True
    frame_num = 0

    if profiler:
        profiler.enable()
    while running:
        # Timers first, so pointer handlers see the current wall time.
        loop.advance_to(max(visualizer.ticks(), loop.now()))

        if not visualizer.handle_events(loop):
            running = False

        visualizer.draw(page.scene(), loop.now())
        visualizer.tick()
        frame_num += 1

        # Hot loops must throttle logs
        if frame_num % log_throttle == 0:
            stats = page.stats()
            logging.info(
                f"Frame {frame_num} | particles {stats['particles']}, ripples {stats['ripples']}, "
                f"ticks {stats['ticks']}"
            )
            logging.debug(
                f"Frame {frame_num} | moves accepted {stats['accepted_moves']}, "
                f"dropped {stats['dropped_moves']}"
            )

        if max_frames and frame_num >= max_frames:
            logging.info(f"Reached max_frames ({max_frames}). Stopping.")
            running = False
    if profiler:
        profiler.disable()

    page.unmount()
    visualizer.close()
    logging.info("Frame loop finished.")

    if profiler:
        logging.info("--- Performance Profile ---")
        s = io.StringIO()
        # Sort by cumulative time spent in the function
        stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
        stats.print_stats(20)
        logging.info(f"\n{s.getvalue()}")

    logging.info("--- Maintenance Page Shutting Down ---")


if __name__ == "__main__":
    main()
