"""
Tick-driven simulation kernel for a single disk head.

Each tick runs three steps:
- Admission: requests whose arrival time has come are handed to the policy
- Service: complete the request in service if the head is on its track, dispatch
  the next one if idle, otherwise move the head one track towards the target
- Termination: stop once idle, nothing is pending and every request was admitted

Completion and dispatch cost zero ticks: a request whose track the head is
already on is dispatched and completed within the same tick. Only head movement
consumes time, one tick per track crossed.
"""
from disk import direction_name


class Simulator:
    def __init__(self, disk, requests, policy, verbose=False, show_queue=False, show_flook=False, admit_all=True):
        self.disk = disk
        self.requests = requests  # Sorted by arrival_time
        self.policy = policy
        self.verbose = verbose
        self.show_queue = show_queue
        self.show_flook = show_flook
        # False keeps the one-admission-per-tick behaviour: requests sharing an
        # arrival tick are admitted on consecutive ticks
        self.admit_all = admit_all
        self.time = 0
        self.next_arrival = 0  # Index of the first request not yet admitted
        self.active = None  # Request in service
        self.movement = 0
        self.busy_time = 0
        self.finished = []
        self.history = []  # (tick, track) at every dispatch and completion

    def log(self, msg):
        if self.verbose:
            print(msg)

    def run(self):
        # Reset all request and head state so one Simulator can be run again
        for request in self.requests:
            request.reset()
        self.disk.reset()

        self.time = 0
        self.next_arrival = 0
        self.active = None
        self.movement = 0
        self.busy_time = 0
        self.finished = []
        self.history = [(0, self.disk.track)]

        self.log("TRACE")
        while True:
            self._admit()
            self._service()
            if self.active is None and not self.policy.has_pending() and self.all_admitted():
                break
            self.time += 1

        return self.finished

    def all_admitted(self):
        return self.next_arrival == len(self.requests)

    def _admit(self):
        while not self.all_admitted() and self.requests[self.next_arrival].arrival_time <= self.time:
            request = self.requests[self.next_arrival]
            self.next_arrival += 1
            self.policy.add(request)
            self.log(f"{self.time}:{request.rid:6d} add {request.target_track}")
            self._trace_staging()
            if not self.admit_all:
                break

    def _service(self):
        while True:
            if self.active is not None:
                if self.disk.track == self.active.target_track:
                    self._complete()
                    continue
                self.disk.step()
                self.movement += 1
                return

            if not self.policy.has_pending():
                return
            self._dispatch()

    def _dispatch(self):
        if self.show_queue:
            print(f"\tGet: {self.policy.describe(self.disk)} dir={direction_name(self.disk.direction)}")
        request = self.policy.get_next(self.disk)
        request.start_time = self.time
        self.disk.face(request.target_track)
        self.active = request
        self.history.append((self.time, self.disk.track))
        self.log(f"{self.time}:{request.rid:6d} issue {request.target_track} {self.disk.track}")
        self._trace_staging()

    def _complete(self):
        request = self.active
        request.end_time = self.time
        self.busy_time += request.end_time - request.start_time
        self.finished.append(request)
        self.active = None
        self.history.append((self.time, self.disk.track))
        self.log(f"{self.time}:{request.rid:6d} finish {request.end_time - request.arrival_time}")

    def _trace_staging(self):
        if not self.show_flook:
            return
        state = self.policy.describe_staging()
        if state is not None:
            print(f"\t{state}")
