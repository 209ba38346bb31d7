import threading

class RequestCounter:
    def __init__(self):
        self._count = 0
        self._lock = threading.Lock()

    def increment(self) -> None:
        with self._lock:
            self._count += 1

    def read(self) -> int:
        with self._lock:
            return self._count

request_counter = RequestCounter()


def get_counter() -> RequestCounter:
    return request_counter
