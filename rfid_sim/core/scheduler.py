import time
import logging

from rfid_sim.core.constants import DEFAULT_SCHEDULER_DT

logger = logging.getLogger(__name__)


class PeriodicTask:
    """A callback fired every ``period`` seconds of scheduler time."""

    def __init__(self, name, period, callback, next_run=0.0):
        if period <= 0:
            raise ValueError(f"Task '{name}' needs a positive period, got {period}")
        self.name = name
        self.period = period
        self.callback = callback
        self.next_run = next_run
        self.runs = 0

    def due(self, now):
        return now + 1e-9 >= self.next_run

    def fire(self, now):
        self.runs += 1
        # Skip missed deadlines instead of bursting to catch up
        while self.next_run <= now + 1e-9:
            self.next_run += self.period
        self.callback(now)


class Scheduler:
    """
    Cooperative single-threaded scheduler driving periodic sensor tasks.

    Tasks never preempt one another: each tick fires every due task to
    completion, in the order the tasks were added.
    """

    def __init__(self, dt=DEFAULT_SCHEDULER_DT):
        """
        Initialize the scheduler

        Args:
            dt (float): Simulated seconds advanced per tick
        """
        if dt <= 0:
            raise ValueError(f"Scheduler dt must be positive, got {dt}")
        self.dt = dt
        self.tasks = []
        self.running = False
        self.time = 0.0

    def now(self):
        """Current scheduler time in seconds."""
        return self.time

    def add_periodic(self, name, period, callback, first_run=None):
        """
        Register a periodic task

        Args:
            name (str): Task name, used in log messages
            period (float): Seconds between runs
            callback (callable): Called with the current time
            first_run (float, optional): First due time, defaults to one
                period from now

        Returns:
            PeriodicTask: The registered task
        """
        next_run = self.time + period if first_run is None else first_run
        task = PeriodicTask(name, period, callback, next_run)
        self.tasks.append(task)
        return task

    def remove(self, name):
        """
        Remove every task registered under a name

        Returns:
            bool: True if a task was removed
        """
        before = len(self.tasks)
        self.tasks = [task for task in self.tasks if task.name != name]
        return len(self.tasks) != before

    def start(self):
        if self.running:
            return False
        self.running = True
        logger.info(f"Scheduler started with {len(self.tasks)} tasks")
        return True

    def stop(self):
        if not self.running:
            return False
        self.running = False
        logger.info(f"Scheduler stopped at t={self.time:.3f}s")
        return True

    def tick(self):
        """
        Advance the clock one step and run every due task

        Returns:
            float: Scheduler time after the tick
        """
        if not self.running:
            return self.time

        self.time += self.dt

        for task in list(self.tasks):
            if not task.due(self.time):
                continue
            try:
                task.fire(self.time)
            except Exception as e:
                logger.error(f"Error in task {task.name}: {e}")

        return self.time

    def run(self, duration, realtime=False):
        """
        Run the scheduler for a span of simulated time

        Args:
            duration (float): Simulated seconds to run
            realtime (bool): Sleep between ticks to track wall-clock time

        Returns:
            float: Scheduler time when the run ended
        """
        if not self.running:
            self.start()

        end_time = self.time + duration

        try:
            while self.running and self.time + 1e-9 < end_time:
                tick_start = time.monotonic()
                self.tick()
                if realtime:
                    time.sleep(max(0.0, self.dt - (time.monotonic() - tick_start)))
        except KeyboardInterrupt:
            logger.info("Scheduler interrupted by user")
            self.running = False

        return self.time
