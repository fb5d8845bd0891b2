from typing import Any
import firebase_admin
from firebase_admin import credentials
from dashboard.config import get_config
from dashboard.logging import get_logger

class FirebaseAuthentication:
    """Handles Firebase credentials and Firestore client creation using AppConfig singleton."""
    def __init__(self) -> None:
        """Initializes the authentication handler using the singleton AppConfig."""
        self.config = get_config()
        self.logger = get_logger(__name__)

    def get_credential(self):
        """Creates a firebase_admin credential from AppConfig values.

        Returns:
            credentials.Base: The credential used to initialise the Firebase app.
        Raises:
            RuntimeError: If required configuration is missing.
        """
        if self.config.firebase_credentials_path:
            self.logger.info("Configuring Firebase authentication with service account file")
            return credentials.Certificate(self.config.firebase_credentials_path)
        elif self.config.firebase_project_id:
            self.logger.info("Configuring Firebase authentication with application default credentials")
            return credentials.ApplicationDefault()
        else:
            self.logger.error("Missing Firebase configuration values.")
            raise RuntimeError("Missing Firebase configuration values.")

    def get_app(self) -> firebase_admin.App:
        """Returns the default Firebase app, initialising it on first use."""
        try:
            return firebase_admin.get_app()
        except ValueError:
            options = {}
            if self.config.firebase_project_id:
                options["projectId"] = self.config.firebase_project_id
            self.logger.info(f"Initialising Firebase app for project: {self.config.firebase_project_id}")
            return firebase_admin.initialize_app(self.get_credential(), options or None)

    def get_firestore_client(self) -> Any:
        """Returns a new async Firestore client using the default Firebase app credentials.

        A fresh client is created per call so it binds to the running event loop.

        Returns:
            google.cloud.firestore.AsyncClient: The Firestore client instance.
        """
        from google.cloud.firestore import AsyncClient
        app = self.get_app()
        self.logger.info(f"Instantiating Firestore AsyncClient for project: {app.project_id}")
        return AsyncClient(project=app.project_id, credentials=app.credential.get_credential())

def get_firebase_auth() -> FirebaseAuthentication:
    """Returns a new FirebaseAuthentication instance using the latest config."""
    return FirebaseAuthentication()
