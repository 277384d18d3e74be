import time
import logging
import signal
import argparse
import threading

from core.app_context import AppContext
from core.config_loader import load_config
from database.init_db import init_db
from pipeline.insights_refresh import refresh_industry_insights

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Global flag for graceful shutdown
running = True
# Set on shutdown so a refresh in progress stops between industries
stop_event = threading.Event()


def signal_handler(sig, frame):
    global running
    logger.info("Shutdown signal received")
    running = False
    stop_event.set()


def run_cycle(ctx: AppContext) -> bool:
    cycle_start = time.time()
    result = refresh_industry_insights(ctx, stop_event=stop_event)
    logger.info(
        f"=== Cycle finished in {time.time() - cycle_start:.2f}s: "
        f"{result.processed} refreshed, {result.fallback_count} fallback, "
        f"{len(result.failed_industries)} failed ==="
    )
    return result.success


def main():
    parser = argparse.ArgumentParser(description="Sensai industry insights refresher")
    parser.add_argument('--config', type=str, default='config.yaml',
                        help='Path to config.yaml')
    parser.add_argument('--once', action='store_true',
                        help='Run a single refresh and exit')
    args = parser.parse_args()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    config = load_config(args.config)
    ctx = AppContext.build(config)

    try:
        init_db(ctx.database)

        if args.once:
            logger.info("Running a single insights refresh")
            success = run_cycle(ctx)
            raise SystemExit(0 if success else 1)

        interval = config.schedule.interval_seconds
        cycle_count = 0
        while running:
            cycle_count += 1
            logger.info(f"=== Starting Cycle #{cycle_count} ===")
            try:
                run_cycle(ctx)
            except Exception as e:
                logger.error(f"Error in main loop: {e}", exc_info=True)

            if running:
                logger.info(f"=== Cycle #{cycle_count} done. Sleeping for {interval} seconds... ===")
                # Sleep in chunks to allow responsive shutdown
                for _ in range(interval // 5):
                    if not running:
                        break
                    time.sleep(5)
    finally:
        ctx.close()


if __name__ == "__main__":
    main()
