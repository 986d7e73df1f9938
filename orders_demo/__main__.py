from orders_demo.runner import main

main()
