import platform
import os
import stat
import logging

logger = logging.getLogger(__name__)

if platform.system() == "Windows":
    try:
        import ntsecuritycon
        import win32api
        import win32security
        WINDOWS_SECURITY_AVAILABLE = True
    except ImportError:
        logger.warning("pywin32 not fully installed, cannot restrict vault file permissions on Windows.")
        WINDOWS_SECURITY_AVAILABLE = False
else:
    WINDOWS_SECURITY_AVAILABLE = False


def restrict_file_permissions(filepath: str) -> bool:
    """
    Make a file readable and writable by its owner only. Failures are
    logged as warnings and never raised.

    Returns:
        True if the permissions were applied, False otherwise.
    """
    if platform.system() == 'Windows':
        return _restrict_windows_acl(filepath)
    try:
        os.chmod(filepath, stat.S_IRUSR | stat.S_IWUSR)  # 600
    except OSError as e:
        logger.warning(f"Failed to set secure file permissions for vault {filepath}: {e}")
        return False
    return True


def _restrict_windows_acl(filepath: str) -> bool:
    """Replace the vault's DACL with one ACE: read/write for the current user."""
    if not WINDOWS_SECURITY_AVAILABLE:
        logger.warning(f"Failed to set secure file permissions for vault {filepath}: pywin32 not available.")
        return False

    try:
        owner_sid, _, _ = win32security.LookupAccountName(None, win32api.GetUserName())
        dacl = win32security.ACL()
        dacl.AddAccessAllowedAce(
            win32security.ACL_REVISION,
            ntsecuritycon.FILE_GENERIC_READ | ntsecuritycon.FILE_GENERIC_WRITE,
            owner_sid
        )
        win32security.SetNamedSecurityInfo(
            filepath,
            win32security.SE_FILE_OBJECT,
            win32security.DACL_SECURITY_INFORMATION | win32security.PROTECTED_DACL_SECURITY_INFORMATION,
            None, None, dacl, None
        )
    except win32api.error as e:
        logger.warning(f"Failed to set secure file permissions for vault {filepath}: {e}")
        return False
    return True
