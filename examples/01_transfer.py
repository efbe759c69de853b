"""
Upload files as a new transfer
"""
import asyncio
import tempfile

from wetransferpy import WeTransferClient, CallbackProgressSink, setup_logging


async def main():
    setup_logging()

    with tempfile.TemporaryDirectory() as chunks:
        async with WeTransferClient("your-api-key", chunks, session="wetransfer") as wt:

            # Follow the stages of every file
            wt.events.on('stage', lambda name, stage: print(f"{name}: {stage.label}"))

            # Progress callback
            def on_progress(report):
                print(f"{report.percentage:5.1f}% {report.message}")

            outcome = await wt.upload_files(
                ["document.pdf", "photo.jpg"],
                "Holiday pictures",
                "me@example.com",
                CallbackProgressSink(on_progress)
            )

            if outcome.success:
                print(f"Download: {outcome.download_url}")
            else:
                print(f"Failed: {outcome}")


if __name__ == "__main__":
    asyncio.run(main())
