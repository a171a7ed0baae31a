import os

from simplelog.sinks.base import BaseSink


class FileSink(BaseSink):
    """
    A sink that appends log output to a file.
    """

    def __init__(self, filepath: str, create: bool = False) -> None:
        """
        Initialize the FileSink with a target file path.

        Args:
            filepath (str): Path to the file to append to.
            create (bool, optional): If True, create parent directories and
                create or truncate the file up front. Defaults to False.

        Raises:
            ValueError: If the filepath is empty.
        """
        if not filepath:
            raise ValueError("Invalid filepath; expected a non-empty path")
        self.filepath = os.fspath(filepath)
        self.create = create

        if self.create:
            directory = os.path.dirname(self.filepath)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.filepath, "wb"):
                pass

    def write(self, data: bytes) -> None:
        """
        Append data to the file.

        Raises:
            FileNotFoundError: If the file is missing and create=False.
        """
        if not self.create and not os.path.exists(self.filepath):
            raise FileNotFoundError(
                f"Failed to write logs to file; '{self.filepath}' does not exist and create=False"
            )
        if isinstance(data, str):
            data = data.encode()
        with open(self.filepath, "ab") as file:
            file.write(data)
            file.flush()
