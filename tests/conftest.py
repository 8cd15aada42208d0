"""
Pytest configuration and shared fixtures for the welc test suite.

This module provides common fixtures, sample wevtutil output and header
text, and configuration helpers for all test modules.
"""

import shutil
import sys
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


# ============================================================================
# Sample Data
# ============================================================================

SECURITY_GL_OUTPUT = """\
name: Security
enabled: true
type: Admin
owningPublisher:
isolation: Custom
channelAccess: O:BAG:SYD:(A;;CCLCSDRCWDWO;;;SY)(A;;CCLC;;;BA)(A;;CC;;;ER)
logging:
  logFileName: %SystemRoot%\\System32\\Winevt\\Logs\\Security.evtx
  retention: false
  autoBackup: false
  maxSize: 20971520
publishing:
  fileMax: 1
"""

POWERSHELL_GL_OUTPUT = """\
name: Microsoft-Windows-PowerShell/Operational
enabled: true
type: Operational
owningPublisher: Microsoft-Windows-PowerShell
isolation: Application
channelAccess: O:BAG:SYD:(A;;0x2;;;S-1-15-2-1)(A;;0x7;;;SY)
logging:
  logFileName: %SystemRoot%\\System32\\Winevt\\Logs\\Microsoft-Windows-PowerShell%4Operational.evtx
  retention: true
  autoBackup: true
  maxSize: 15728640
publishing:
  fileMax: 1
"""

KERNEL_GP_OUTPUT = """\
name: Microsoft-Windows-Kernel-General
guid: {A68CA8B7-004F-D7B6-A698-07E2DE0F1F5D}
helpLink: https://go.microsoft.com/fwlink/events.asp?CoName=Microsoft
resourceFileName: %SystemRoot%\\system32\\ntoskrnl.exe
messageFileName: %SystemRoot%\\system32\\ntoskrnl.exe
message:
channels:
  channel:
    name: System
    id: 8
    flags: 1
    message: System
  channel:
    name: Microsoft-Windows-Kernel-General/Analytic
    id: 16
    flags: 0
    message:
levels:
  level:
    name: win:Error
    value: 2
    message: Error
"""

WEC_HEADER_TEXT = """\
//**********************************************************************`
//* This is an include file generated by Message Compiler.             *`
//*                                                                    *`
//* Copyright (c) Microsoft Corporation. All Rights Reserved.          *`
//**********************************************************************`
#pragma once
//+
// Provider Corp-WEC-Basic Event Count 0
//+
EXTERN_C __declspec(selectany) const GUID WEC_EVENTS_Basic = {0xcf27f07f, 0x7013, 0x483a, {0xbc, 0x74, 0x97, 0xa0, 0xf6, 0xaa, 0x32, 0xfc}};

//
// Channel
//
#define WEC_Basic_Domain_Controllers 0x10
#define WEC_Basic_Member_Servers 0x11
#define WEC_Basic_Privileged_Access_Workstations 0x12
#define WEC_Basic_Clients 0x13
#define WEC_Basic_Critical 0x14
#define WEC_Basic_Security 0x15
#define WEC_Basic_PowerShell 0x16
#define WEC_Basic_Application 0x17

//
// Event Descriptors
//
//+
// Provider Corp-WEC-Advanced Event Count 0
//+
EXTERN_C __declspec(selectany) const GUID WEC_EVENTS_Advanced = {0x0014355c, 0xd05c, 0x4b81, {0x9c, 0x93, 0x1f, 0x6a, 0x39, 0x07, 0xe5, 0x35}};

//
// Channel
//
#define WEC_Advanced_Domain_Controllers 0x10
#define WEC_Advanced_Member_Servers 0x11
#define WEC_Advanced_Privileged_Access_Workstations 0x12
#define WEC_Advanced_Clients 0x13
#define WEC_Advanced_Critical 0x14
#define WEC_Advanced_Security 0x15
#define WEC_Advanced_PowerShell 0x16
#define WEC_Advanced_Application 0x17

//
// Event Descriptors
//
"""


@pytest.fixture
def security_gl_output():
    """`wevtutil gl Security` output from a domain controller."""
    return SECURITY_GL_OUTPUT


@pytest.fixture
def powershell_gl_output():
    """`wevtutil gl Microsoft-Windows-PowerShell/Operational` output."""
    return POWERSHELL_GL_OUTPUT


@pytest.fixture
def kernel_gp_output():
    """`wevtutil gp Microsoft-Windows-Kernel-General` output."""
    return KERNEL_GP_OUTPUT


@pytest.fixture
def wec_header_text():
    """Header generated by mc.exe for the Corp-WEC custom channel manifest."""
    return WEC_HEADER_TEXT


@pytest.fixture
def wec_header_file(temp_dir):
    """The Corp-WEC header written to disk."""
    header_file = temp_dir / "CustomEventChannels.h"
    header_file.write_text(WEC_HEADER_TEXT, encoding="utf-8")
    return header_file


# ============================================================================
# Mock Fixtures
# ============================================================================


@pytest.fixture
def fake_wevtutil():
    """
    Patch `run_command` in the collector with a canned wevtutil host.

    The returned dict maps argument tuples (verb and name, without the
    executable and /r: option) to (returncode, stdout, stderr). Recorded
    commands are available under the "calls" key.
    """
    responses = {
        ("el",): (0, "Application\nSecurity\nMicrosoft-Windows-PowerShell/Operational\n", ""),
        ("ep",): (0, "Microsoft-Windows-Kernel-General\nMicrosoft-Windows-PowerShell\n", ""),
        ("gl", "Security"): (0, SECURITY_GL_OUTPUT, ""),
        ("gl", "Microsoft-Windows-PowerShell/Operational"): (0, POWERSHELL_GL_OUTPUT, ""),
        ("gp", "Microsoft-Windows-Kernel-General"): (0, KERNEL_GP_OUTPUT, ""),
    }
    calls = []

    def run(command, timeout=None):
        calls.append(list(command))
        key = tuple(arg for arg in command[1:] if not arg.startswith("/r:"))
        return responses.get(key, (15007, "", "Failed to read configuration. The specified channel could not be found.\n"))

    with patch("welc.eventlog.collector.run_command", side_effect=run) as mock_run:
        yield {"responses": responses, "calls": calls, "run": mock_run}


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "collector": {
            "wevtutil_path": "wevtutil.exe",
            "command_timeout": 15.0,
            "skip_inaccessible": False,
            "default_computer": "DC01",
        },
        "report": {
            "max_rows": 20,
            "log_level": "debug",
        },
    }


@pytest.fixture
def config_file(temp_dir, sample_config_data):
    """Write the sample configuration to a temporary config.toml."""
    import toml

    config_path = temp_dir / "config.toml"
    with open(config_path, "w") as f:
        toml.dump(sample_config_data, f)
    return config_path


@pytest.fixture(autouse=True)
def clear_config_after_test():
    """Automatically clear configuration cache after each test."""
    yield

    from welc.config import DEFAULT_CONFIG_FILE_PATH, clear_config_cache, set_config_path

    clear_config_cache()
    set_config_path(DEFAULT_CONFIG_FILE_PATH)
