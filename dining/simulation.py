"""The dining philosophers simulation, one thread per philosopher plus a monitor."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass
from typing import List, Optional, TextIO

from dining.config import Settings

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"
DIED = "died"


def now_ms() -> int:
    """Current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def precise_sleep(ms: int) -> None:
    """Sleep for at least ``ms`` milliseconds, checking the clock often."""
    start = now_ms()
    while now_ms() - start < ms:
        time.sleep(0.0005)


@dataclass
class Philosopher:
    """One seat at the table; ``left`` and ``right`` are fork indices."""

    id: int
    left: int
    right: int
    meals_eaten: int = 0
    last_meal_time: int = 0


class Table:
    """Shared state of a run: forks, philosophers, the stop flag and the log."""

    def __init__(self, settings: Settings, stream: Optional[TextIO] = None) -> None:
        self.settings = settings
        self._stream = stream if stream is not None else sys.stdout
        count = settings.philo_count
        self.forks = [threading.Lock() for _ in range(count)]
        self._write_lock = threading.Lock()
        self._dead_lock = threading.Lock()
        self._meal_lock = threading.Lock()
        self._over = False
        self.start_time = now_ms()
        self.philosophers: List[Philosopher] = [
            Philosopher(id=i + 1, left=i, right=(i + 1) % count, last_meal_time=self.start_time)
            for i in range(count)
        ]

    def is_over(self) -> bool:
        """True once a philosopher has died or everyone has eaten enough."""
        with self._dead_lock:
            return self._over

    def stop(self) -> None:
        """End the simulation; no further status lines are printed."""
        with self._dead_lock:
            self._over = True

    def _write(self, line: str) -> None:
        self._stream.write(line)
        self._stream.flush()

    def print_status(self, philosopher: Philosopher, status: str) -> None:
        """Log ``status`` for ``philosopher`` unless the simulation is over."""
        with self._write_lock:
            if not self.is_over():
                self._write(f"{now_ms() - self.start_time} {philosopher.id} {status}\n")

    def _take_forks(self, philo: Philosopher) -> bool:
        """Acquire both forks in index order; False when the philosopher must give up."""
        if philo.left == philo.right:
            with self.forks[philo.left]:
                self.print_status(philo, TAKEN_FORK)
                while not self.is_over():
                    precise_sleep(1)
            return False
        first, second = sorted((philo.left, philo.right))
        self.forks[first].acquire()
        self.print_status(philo, TAKEN_FORK)
        self.forks[second].acquire()
        self.print_status(philo, TAKEN_FORK)
        return True

    def _routine(self, philo: Philosopher) -> None:
        settings = self.settings
        if philo.id % 2 == 0:
            precise_sleep(settings.time_to_eat // 2)
        while not self.is_over():
            if not self._take_forks(philo):
                break
            self.print_status(philo, EATING)
            with self._meal_lock:
                philo.last_meal_time = now_ms()
                philo.meals_eaten += 1
            precise_sleep(settings.time_to_eat)
            self.forks[philo.left].release()
            self.forks[philo.right].release()
            self.print_status(philo, SLEEPING)
            precise_sleep(settings.time_to_sleep)
            self.print_status(philo, THINKING)
            if settings.philo_count % 2 != 0:
                precise_sleep(settings.time_to_eat // 4)

    def _check_death(self, philo: Philosopher) -> bool:
        with self._meal_lock:
            starving = now_ms() - philo.last_meal_time >= self.settings.time_to_die
        if not starving:
            return False
        self.stop()
        with self._write_lock:
            self._write(f"{now_ms() - self.start_time} {philo.id} {DIED}\n")
        return True

    def _monitor(self) -> None:
        must_eat = self.settings.must_eat_count
        while True:
            fed = 0
            for philo in self.philosophers:
                if self._check_death(philo):
                    return
                with self._meal_lock:
                    if must_eat is not None and philo.meals_eaten >= must_eat:
                        fed += 1
            if must_eat is not None and fed == self.settings.philo_count:
                self.stop()
                return
            precise_sleep(1)

    def run(self) -> None:
        """Start every philosopher and the monitor, and wait for them all to finish."""
        workers = [
            threading.Thread(target=self._routine, args=(philo,), name=f"philosopher-{philo.id}")
            for philo in self.philosophers
        ]
        for worker in workers:
            worker.start()
        monitor = threading.Thread(target=self._monitor, name="monitor")
        monitor.start()
        for worker in workers:
            worker.join()
        monitor.join()