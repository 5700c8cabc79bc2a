from car_rental.main import main

main()
