"""Writing the finished PDF and opening it in the default viewer."""

import os
import platform
import subprocess
import tempfile
from typing import Dict, List, Optional, Tuple

from fpdf import FPDF
from PyPDF2 import PdfReader

from src.utils.exceptions import FileWriteError, ProcessLaunchError, UnsupportedPlatformError
from src.utils.logger import get_logger
from src.utils.validators import validate_output_path

# platform.system() -> command prefix; the file path is appended
VIEWER_COMMANDS: Dict[str, Tuple[str, ...]] = {
    "Linux": ("xdg-open",),
    "Windows": ("rundll32", "url.dll,FileProtocolHandler"),
    "Darwin": ("open",),
}


class PDFFinalizer:
    """Serializes a drawn canvas to disk."""

    def __init__(self) -> None:
        """Initialize PDF finalizer."""
        self.logger = get_logger(__name__)

    def write(self, pdf: FPDF, output_path: str) -> str:
        """Write the canvas to output_path, replacing any existing file.

        The bytes go to a temporary file in the same directory first, so a
        failed write never leaves a partial PDF behind.

        Args:
            pdf: Fully drawn document.
            output_path: Destination file.

        Returns:
            Path of the written file.

        Raises:
            FileWriteError: If the document cannot be written.
        """
        validate_output_path(output_path)
        directory = os.path.dirname(os.path.abspath(output_path))

        data = bytes(pdf.output())

        temp_path = None
        try:
            fd, temp_path = tempfile.mkstemp(suffix=".pdf.tmp", dir=directory)
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            # mkstemp creates the file owner-only
            os.chmod(temp_path, 0o644)
            os.replace(temp_path, output_path)
        except OSError as e:
            if temp_path is not None and os.path.exists(temp_path):
                os.remove(temp_path)
            raise FileWriteError(output_path, str(e))

        self.logger.info(f"Wrote {len(data)} bytes to {output_path}")
        return output_path

    def page_count(self, pdf_path: str) -> int:
        """Count the pages of a written PDF."""
        with open(pdf_path, "rb") as f:
            reader = PdfReader(f)
            return len(reader.pages)


class ViewerLauncher:
    """Opens a file with the platform's default application."""

    def __init__(
        self,
        system: Optional[str] = None,
        commands: Optional[Dict[str, Tuple[str, ...]]] = None
    ) -> None:
        """Initialize viewer launcher.

        Args:
            system: Platform name as reported by platform.system(). Detected when None.
            commands: Platform to command-prefix table.
        """
        self.logger = get_logger(__name__)
        self.system = system if system is not None else platform.system()
        self.commands = commands if commands is not None else VIEWER_COMMANDS

    def command_for(self, file_path: str) -> List[str]:
        """Build the launch command for file_path.

        Raises:
            UnsupportedPlatformError: If the platform has no viewer command.
        """
        prefix = self.commands.get(self.system)
        if prefix is None:
            raise UnsupportedPlatformError(self.system)
        return [*prefix, file_path]

    def check_supported(self) -> None:
        """Fail early when the platform has no viewer command."""
        self.command_for("")

    def launch(self, file_path: str) -> subprocess.Popen:
        """Start the viewer without waiting for it.

        Raises:
            UnsupportedPlatformError: If the platform has no viewer command.
            ProcessLaunchError: If the process cannot be started.
        """
        command = self.command_for(file_path)
        try:
            process = subprocess.Popen(command)
        except OSError as e:
            raise ProcessLaunchError(f"Error opening PDF with {command[0]}: {str(e)}")

        self.logger.debug(f"Started viewer (pid {process.pid}): {' '.join(command)}")
        return process
