class ContainerError(Exception):
    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class NullKeyError(ContainerError, ValueError):
    def __init__(self) -> None:
        super().__init__("key must not be None")


class InvalidBucketCountError(ContainerError, ValueError):
    def __init__(self, bucket_count: object) -> None:
        super().__init__(f"bucket count must be a positive integer, got {bucket_count!r}")
        self.bucket_count = bucket_count
