#!/usr/bin/env python3
"""
Basic usage examples for the Vagon streams client library.

Reads credentials from VAGON_API_KEY and VAGON_API_SECRET, lists the
organization's applications and their streams, and shows how errors are
reported.
"""

import logging
import sys

from vagon_streams import (
    Configuration,
    ConfigurationError,
    HTTPError,
    MachineStatsQuery,
    TransportError,
    VagonStreamsClient,
    VagonStreamsError
)


def main():
    """Run basic usage examples."""

    print("=== Vagon Streams Client Basic Usage Examples ===\n")

    print("1. Creating client from environment...")
    try:
        client = VagonStreamsClient.from_env()
    except ConfigurationError as e:
        print(f"   ✗ {e}")
        print("   Set VAGON_API_KEY and VAGON_API_SECRET first.")
        sys.exit(1)
    print(f"   Client created for key: {client.config.api_key[:8]}...\n")

    try:
        print("2. Listing applications...")
        applications = client.application_list()
        print(f"   ✓ {applications['count']} application(s)")
        for application in applications['applications']:
            attributes = application['attributes']
            print(f"   - {application['id']}: {attributes['name']} ({attributes['friendly_status']})")
        print()

        print("3. Listing streams of each application...")
        for application in applications['applications']:
            streams = client.stream_list(application['id'])
            print(f"   {application['attributes']['name']}: {streams['count']} stream(s)")
        print()

        print("4. Machine statistics (first page)...")
        stats = client.stream_machine_stats(query=MachineStatsQuery())
        print(f"   ✓ {stats['count']} machine session(s)")
        print()

        print("5. Demonstrating error handling...")
        wrong_client = VagonStreamsClient(Configuration("wrong-key", "wrong-secret"))
        try:
            wrong_client.application_list()
            print("    ✗ Unexpected success with wrong credentials")
        except HTTPError as e:
            print(f"    ✓ Rejected wrong credentials ({e.status}): {e.body[:80]}")
        finally:
            wrong_client.close()
        print()

        print("=== All Examples Completed Successfully! ===")

    except HTTPError as e:
        print(f"API Error {e.status}: {e.body}")
        sys.exit(1)
    except TransportError as e:
        print(f"Network Error: {e}")
        sys.exit(1)
    except VagonStreamsError as e:
        print(f"Client Error: {e}")
        sys.exit(1)
    finally:
        client.close()


def demonstrate_configuration():
    """Demonstrate client configuration options."""

    print("\n=== Configuration Options Example ===")

    config = Configuration(
        api_key="your-api-key",
        api_secret="your-api-secret",
        request_timeout=15  # abort calls after 15 seconds
    )

    with VagonStreamsClient(config) as client:
        print("✓ Client configured with:")
        print(f"  - Request timeout: {client.config.request_timeout} seconds")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.WARNING)

    main()
    demonstrate_configuration()
