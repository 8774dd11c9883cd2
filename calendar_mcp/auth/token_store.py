"""
Token Store Module

This module keeps OAuth tokens for many users and providers in a single
encrypted file. Tokens are issued elsewhere; this store only persists them and
hands them out per (user_id, provider).
"""

import os
import json
import base64
import secrets
import threading
from typing import Any, Dict, Optional
from pathlib import Path

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from calendar_mcp.utils.logger import get_logger
from calendar_mcp.utils.config import get_config

logger = get_logger(__name__)

# Salt file name (stored alongside tokens)
SALT_FILE_NAME = "encryption_salt"

SUPPORTED_PROVIDERS = ("google", "microsoft")

# Singleton instance
_instance: Optional["TokenStore"] = None


def get_token_store() -> "TokenStore":
    """
    Get the singleton TokenStore instance.

    Returns:
        TokenStore: The singleton TokenStore instance.
    """
    global _instance
    if _instance is None:
        _instance = TokenStore()
    return _instance


class TokenStore:
    """
    Encrypted per-user, per-provider OAuth token storage.

    The decrypted document has the shape::

        {"<user_id>": {"<provider>": {"access_token": ..., "refresh_token": ...,
                                      "token_type": ..., "expires_at": <epoch seconds>}}}
    """

    def __init__(self) -> None:
        """Initialize the TokenStore."""
        self.config = get_config()

        token_path = self.config.get("token_storage_path", "")
        if not token_path:
            token_path = os.path.join(os.path.expanduser("~"), ".calendar-mcp", "tokens.json")
        elif token_path.startswith("~"):
            token_path = os.path.expanduser(token_path)

        self.token_path = Path(token_path)

        self.encryption_key = self._get_encryption_key()
        self.fernet = Fernet(self.encryption_key)
        self._lock = threading.Lock()

    def _get_or_create_salt(self) -> bytes:
        """
        Get or create a random salt for key derivation.

        The salt is stored in a file alongside the token file.

        Returns:
            bytes: The salt for key derivation.
        """
        salt_path = self.token_path.parent / SALT_FILE_NAME

        if salt_path.exists():
            with open(salt_path, "rb") as f:
                return f.read()

        salt = secrets.token_bytes(16)

        self.token_path.parent.mkdir(parents=True, exist_ok=True, mode=0o700)

        with open(salt_path, "wb") as f:
            f.write(salt)
        salt_path.chmod(0o600)

        logger.info(f"Generated new encryption salt at {salt_path}")
        return salt

    def _get_encryption_key(self) -> bytes:
        """
        Get the encryption key from the environment and derive a proper key using PBKDF2.

        Raises:
            ValueError: If TOKEN_ENCRYPTION_KEY is not set.

        Returns:
            bytes: The derived encryption key.
        """
        key = self.config.get("token_encryption_key", "")

        if not key:
            raise ValueError(
                "TOKEN_ENCRYPTION_KEY environment variable is required. "
                "Generate one with: python3 -c \"from cryptography.fernet import Fernet; print(Fernet.generate_key().decode())\""
            )

        salt = self._get_or_create_salt()

        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=32,
            salt=salt,
            iterations=100000,
        )
        return base64.urlsafe_b64encode(kdf.derive(key.encode()))

    def _read_all(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        if not self.token_path.exists():
            return {}

        with open(self.token_path, "r") as f:
            encrypted = f.read()

        if not encrypted:
            return {}

        return json.loads(self.fernet.decrypt(encrypted.encode()).decode())

    def _write_all(self, data: Dict[str, Dict[str, Dict[str, Any]]]) -> None:
        token_json = self.fernet.encrypt(json.dumps(data).encode()).decode()

        self.token_path.parent.mkdir(parents=True, exist_ok=True, mode=0o700)

        with open(self.token_path, "w") as f:
            f.write(token_json)
        self.token_path.chmod(0o600)

    def store_tokens(self, user_id: str, provider: str, tokens: Dict[str, Any]) -> None:
        """
        Store the OAuth tokens for a user and provider, replacing any previous entry.

        Args:
            user_id (str): The user the tokens belong to.
            provider (str): The OAuth provider ("google" or "microsoft").
            tokens (Dict[str, Any]): access_token, refresh_token, token_type, expires_at.

        Raises:
            ValueError: If user_id is empty, the provider is unknown or access_token is missing.
        """
        if not user_id:
            raise ValueError("user_id is required")
        if provider not in SUPPORTED_PROVIDERS:
            raise ValueError(f"Unsupported provider '{provider}'. Must be one of: {', '.join(SUPPORTED_PROVIDERS)}")
        if not tokens.get("access_token"):
            raise ValueError("access_token is required")

        entry = {
            "access_token": tokens["access_token"],
            "refresh_token": tokens.get("refresh_token"),
            "token_type": tokens.get("token_type") or "Bearer",
            "expires_at": tokens.get("expires_at"),
        }

        with self._lock:
            data = self._read_all()
            data.setdefault(user_id, {})[provider] = entry
            self._write_all(data)

        logger.info(f"Stored {provider} tokens for user {user_id}")

    def get_oauth_tokens(self, user_id: str, provider: str) -> Dict[str, Any]:
        """
        Look up the tokens for a user and provider.

        Args:
            user_id (str): The user to look up.
            provider (str): The OAuth provider.

        Returns:
            Dict[str, Any]: On success ``{"success": True, "provider", "tokens": {provider: {...}}, "message"}``.
                On failure ``{"success": False, "error", "requires_auth", "message"}``; requires_auth is
                True when the user simply has not connected this provider yet.
        """
        try:
            with self._lock:
                data = self._read_all()
        except (InvalidToken, ValueError, OSError) as e:
            logger.error(f"Failed to read token store at {self.token_path}: {e}")
            return {
                "success": False,
                "error": "Failed to read token store",
                "requires_auth": False,
            }

        tokens = data.get(user_id, {}).get(provider)
        if not tokens:
            logger.warning(f"No {provider} tokens found for user {user_id}")
            return {
                "success": False,
                "error": "No tokens found",
                "requires_auth": True,
                "message": f"Authentication required: Please connect your {provider} account.",
            }

        return {
            "success": True,
            "provider": provider,
            "tokens": {provider: dict(tokens)},
            "message": f"Retrieved {provider} OAuth tokens successfully",
        }

    def clear_tokens(self, user_id: str, provider: Optional[str] = None) -> bool:
        """
        Remove stored tokens for a user, either for one provider or all of them.

        Returns:
            bool: True if anything was removed.
        """
        with self._lock:
            data = self._read_all()
            user_tokens = data.get(user_id)
            if not user_tokens:
                return False

            if provider is None:
                del data[user_id]
            elif provider in user_tokens:
                del user_tokens[provider]
                if not user_tokens:
                    del data[user_id]
            else:
                return False

            self._write_all(data)

        logger.info(f"Cleared {provider or 'all'} tokens for user {user_id}")
        return True

    def has_tokens(self, user_id: str, provider: str) -> bool:
        """
        Check whether tokens exist for a user and provider.

        Returns:
            bool: True if an entry exists, False otherwise.
        """
        return self.get_oauth_tokens(user_id, provider)["success"]
