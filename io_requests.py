class IORequest:
    def __init__(self, rid, arrival_time, target_track):
        self.rid = rid  # Input order, starting at 0
        self.arrival_time = arrival_time
        self.target_track = target_track
        self.start_time = None  # Tick the policy picked this request
        self.end_time = None  # Tick the head reached target_track

    def reset(self):
        """Clear timestamps left over from a previous simulation run."""
        self.start_time = None
        self.end_time = None

    def is_finished(self):
        return self.end_time is not None

    def __repr__(self):
        return (f"IORequest(rid={self.rid}, arrival={self.arrival_time}, track={self.target_track}, "
                f"start={self.start_time}, end={self.end_time})")
