"""Port for the application directory - driven/secondary port."""

from typing import Protocol

from ...domain.entities import Application


class ApplicationRepository(Protocol):
    """
    Port for retrieving application registrations from the directory.

    This is a driven (secondary) port that defines how the application
    reads registered applications and their credentials.
    """

    async def fetch_applications(self) -> list[Application]:
        """
        Retrieve all applications with their key and password credentials.

        Returns:
            List of applications in directory order.

        Raises:
            DirectoryFetchError: If retrieval or authentication fails.
        """
        ...
