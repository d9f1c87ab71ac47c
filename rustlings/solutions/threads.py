"""Thread exercises: joining, shared counters, channels and shared data."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from queue import SimpleQueue

_DONE = object()


def join_all(count: int = 10, delay: float = 0.25) -> int:
    """Start threads that sleep, wait for all of them and count the finished ones."""

    def worker(index: int) -> None:
        time.sleep(delay)
        print(f"thread {index} is complete")

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    completed = sum(not thread.is_alive() for thread in threads)
    if completed != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    return completed


@dataclass
class JobStatus:
    """Number of jobs finished so far."""

    jobs_completed: int = 0


def complete_jobs(count: int = 10) -> JobStatus:
    """Let each of count threads record one finished job in a shared status."""
    status = JobStatus()
    lock = threading.Lock()

    def worker() -> None:
        with lock:
            status.jobs_completed += 1

    threads = [threading.Thread(target=worker) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
        with lock:
            print(f"jobs completed {status.jobs_completed}")
    return status


@dataclass
class Queue:
    """Values to send, split in two halves, and the expected total."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])
    delay: float = 1.0


def send_tx(queue: Queue, channel: SimpleQueue) -> list[threading.Thread]:
    """Send each half of the queue from its own thread; return the senders."""

    def sender(values: list[int]) -> None:
        for value in values:
            print(f"sending {value}")
            channel.put(value)
            time.sleep(queue.delay)
        channel.put(_DONE)

    threads = [
        threading.Thread(target=sender, args=(half,))
        for half in (queue.first_half, queue.second_half)
    ]
    for thread in threads:
        thread.start()
    return threads


def receive_all(queue: Queue) -> list[int]:
    """Receive every value sent for the queue, in arrival order."""
    channel: SimpleQueue = SimpleQueue()
    senders = send_tx(queue, channel)
    received: list[int] = []
    finished = 0
    while finished < len(senders):
        item = channel.get()
        if item is _DONE:
            finished += 1
            continue
        print(f"Got: {item}")
        received.append(item)
    for sender in senders:
        sender.join()
    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(
            f"received {len(received)} numbers but the queue has length {queue.length}"
        )
    return received


def offset_sums(numbers: Iterable[int], threads: int = 8) -> list[int]:
    """Sum every threads-th value per offset, one thread per offset."""
    if threads <= 0:
        raise ValueError("threads must be positive")
    shared = tuple(numbers)

    def total(offset: int) -> int:
        result = sum(n for n in shared if n % threads == offset)
        print(f"Sum of offset {offset} is {result}")
        return result

    with ThreadPoolExecutor(max_workers=threads) as pool:
        return list(pool.map(total, range(threads)))