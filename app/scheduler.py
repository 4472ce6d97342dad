"""
Status Scheduler Configuration
Runs the order status sweep on a crontab schedule inside the API process.
"""

import logging
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from app.core.config import Settings, get_settings
from app.services import OrderStore
from app.tasks import advance_order_statuses

logger = logging.getLogger(__name__)

JOB_ID = "advance_order_statuses"


class StatusScheduler:
    """Fires advance_order_statuses against one order store on a cron trigger."""

    def __init__(self, order_store: OrderStore, settings: Optional[Settings] = None):
        self.order_store = order_store
        self.settings = settings or get_settings()
        self.scheduler = AsyncIOScheduler(timezone=self.settings.status_update_timezone)
        self.trigger = CronTrigger.from_crontab(
            self.settings.status_update_cron,
            timezone=self.settings.status_update_timezone,
        )

    @property
    def running(self) -> bool:
        return self.scheduler.running

    def start(self) -> None:
        """Register the sweep job and start the scheduler on the running event loop."""
        self.scheduler.add_job(
            advance_order_statuses,
            trigger=self.trigger,
            id=JOB_ID,
            args=[self.order_store],
            name="Advance order statuses",
            replace_existing=True,
            max_instances=1,
            coalesce=False,
            misfire_grace_time=None,
        )
        self.scheduler.start()
        logger.info(f"Status scheduler started ({self.settings.status_update_cron!r})")

    def shutdown(self) -> None:
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            logger.info("Status scheduler stopped")

    def run_once(self) -> dict:
        """Run one firing synchronously, outside the timer."""
        return advance_order_statuses(self.order_store)
