"""
Create a board, add files and links
"""
import asyncio
import tempfile

from wetransferpy import WeTransferClient, LinkRequest, ProgressRecorder

USER = "me@example.com"


async def main():
    with tempfile.TemporaryDirectory() as chunks:
        async with WeTransferClient("your-api-key", chunks) as wt:
            board = await wt.create_board("Moodboard", USER, description="Ideas")
            if not board.success:
                print(f"Board not created: {board.message}")
                return
            print(f"Board: {board.board_url}")

            recorder = ProgressRecorder()
            outcome = await wt.upload_files_to_board(board.id, ["sketch.png"], USER, recorder)
            for report in recorder.drain():
                print(f"{report.percentage:5.1f}% {report.message}")
            print(outcome)

            links = await wt.add_links(board.id, [
                LinkRequest("https://wetransfer.com", "WeTransfer"),
            ], USER)
            for link in links.links:
                print(f"{link.url}: {'ok' if link.success else 'failed'}")

            info = await wt.get_board_info(board.id, USER)
            print(f"{info.name} has {len(info.items)} item(s)")


if __name__ == "__main__":
    asyncio.run(main())
