# main.py
# Launcher so the application can be started with `python main.py` from the project root.
from file_organizer.main import main

if __name__ == '__main__':
    main()
