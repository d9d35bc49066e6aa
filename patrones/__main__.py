from patrones.demo import main

main()
