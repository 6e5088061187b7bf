from ghostty_themes.scripting.cli import main

if __name__ == "__main__":
    main()
