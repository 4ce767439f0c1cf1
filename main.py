from flappy_poles.game import main


if __name__ == "__main__":
    main()
